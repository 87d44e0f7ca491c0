"""
User progress repository.

One document per chat user in the answers collection:
`lastQuestionId` plus one `"<questionId>": <answerCode>` field per
answered question.
"""

from typing import Any, Callable, Dict, Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from sixfactors.core.errors import StoreFailure
from sixfactors.utils.logger import get_logger

logger = get_logger(__name__)

LAST_QUESTION_FIELD = "lastQuestionId"

STORE_FAILURE_MESSAGE = "Unable to reach the answer store."


class ProgressStore:
    """
    Reads and merges per-user progress records.

    The collection is resolved on first use, so requests that never
    touch the store never open a connection.
    """

    def __init__(self, collection_provider: Callable[[], Collection]):
        self._collection_provider = collection_provider
        self._collection: Optional[Collection] = None

    @property
    def collection(self) -> Collection:
        if self._collection is None:
            try:
                self._collection = self._collection_provider()
            except RuntimeError as exc:
                logger.error(
                    "Answer store unavailable",
                    extra={"error": str(exc)},
                )
                raise StoreFailure(STORE_FAILURE_MESSAGE) from exc
        return self._collection

    def get_progress(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the progress record of a user.

        Args:
            user_id (str): Chat platform user identifier.

        Returns:
            Optional[Dict]: Record without `_id`, or None if the user
            never answered.

        Raises:
            StoreFailure: If the read fails.
        """
        try:
            return self.collection.find_one(
                {"user_id": user_id},
                {"_id": 0},
            )

        except PyMongoError as exc:
            logger.exception(
                "Failed to read user progress",
                extra={"user_id": user_id},
            )
            raise StoreFailure(STORE_FAILURE_MESSAGE) from exc

    def get_last_question_id(self, user_id: str) -> int:
        """
        Return the last question id recorded for a user, -1 if none.

        Raises:
            StoreFailure: If the read fails.
        """
        record = self.get_progress(user_id) or {}
        last_question_id = record.get(LAST_QUESTION_FIELD)

        if last_question_id is None:
            logger.debug(
                "No stored progress",
                extra={"user_id": user_id},
            )
            return -1

        return int(last_question_id)

    def update_progress(self, user_id: str, fields: Dict[str, Any]) -> None:
        """
        Merge `fields` into the user's record, creating it if needed.

        Args:
            user_id (str): Chat platform user identifier.
            fields (Dict[str, Any]): Fields to set; others are untouched.

        Raises:
            StoreFailure: If the write fails.
        """
        try:
            self.collection.update_one(
                {"user_id": user_id},
                {"$set": fields},
                upsert=True,
            )

        except PyMongoError as exc:
            logger.exception(
                "Failed to update user progress",
                extra={"user_id": user_id, "fields": list(fields)},
            )
            raise StoreFailure(STORE_FAILURE_MESSAGE) from exc

        logger.debug(
            "User progress updated",
            extra={"user_id": user_id, "fields": list(fields)},
        )
