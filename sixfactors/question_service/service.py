"""
Six factors question service.

Handles question progression and answer persistence for the
chat platform webhooks.
"""

import re
from typing import Dict, Optional

from sixfactors.config import Settings
from sixfactors.core.errors import InvalidParameter, MissingParameter
from sixfactors.question_service.catalog import QuestionCatalog
from sixfactors.question_service.language import resolve_language
from sixfactors.repositories.progress_repository import (
    LAST_QUESTION_FIELD,
    ProgressStore,
)
from sixfactors.utils.logger import get_logger

logger = get_logger(__name__)

END_OF_TEST_ID = -1

# Stored when an answer phrase has no code.
UNKNOWN_ANSWER_CODE = None

_LEADING_INT = re.compile(r"\s*([+-]?)0*(\d+)")

# Longer digit runs are clamped; no catalog gets near this size.
MAX_QUESTION_ID_DIGITS = 9


def parse_question_id(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a question id.

    "3", " 3", "3abc" give 3; "", "abc", None give None. Ids with
    more than MAX_QUESTION_ID_DIGITS digits are clamped to
    +/-10**MAX_QUESTION_ID_DIGITS, which is never a catalog index.
    """
    if value is None:
        return None

    match = _LEADING_INT.match(value)
    if match is None:
        return None

    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2)

    if len(digits) > MAX_QUESTION_ID_DIGITS:
        return sign * 10**MAX_QUESTION_ID_DIGITS

    return sign * int(digits)


def require_param(value: Optional[str], message: str) -> str:
    """
    Return `value` if it is a non-empty string.

    Raises:
        MissingParameter: If the value is missing or empty.
    """
    if value is None or len(value) == 0:
        logger.warning(message)
        raise MissingParameter(message)

    return value


def get_answer_code(
    catalog: QuestionCatalog,
    lang: str,
    user_answer: str,
    default_lang: str,
) -> Optional[int]:
    """
    Map a localized answer phrase to its code.

    An unknown language uses the `default_lang` table. An unknown
    phrase gives UNKNOWN_ANSWER_CODE.
    """
    codes = catalog.answer_codes(lang)

    if codes is None:
        logger.info(
            "No answer codes for language, using default",
            extra={"lang": lang, "default_lang": default_lang},
        )
        codes = catalog.answer_codes(default_lang) or {}

    return codes.get(user_answer, UNKNOWN_ANSWER_CODE)


def _end_of_test(reason: str) -> Dict:
    logger.info("End of test", extra={"reason": reason})

    return {
        "isComplete": True,
        "questionId": END_OF_TEST_ID,
        "questionText": "",
    }


def get_next_question(
    catalog: QuestionCatalog,
    store: ProgressStore,
    settings: Settings,
    user_id: Optional[str],
    locale: Optional[str],
    last_question_id: Optional[str] = None,
) -> Dict:
    """
    Determine the question following the user's last one.

    Flow:
    - Validate user id and locale
    - Use the explicit last question id, or the stored one (-1 if none)
    - Increment and look the question up in the catalog

    Args:
        catalog (QuestionCatalog): Shared question catalog.
        store (ProgressStore): User progress store.
        settings (Settings): Application settings.
        user_id (Optional[str]): Chat platform user identifier.
        locale (Optional[str]): User locale.
        last_question_id (Optional[str]): Last question id, if known.

    Returns:
        Dict: `isComplete`, `questionId` and `questionText` attributes.

    Raises:
        MissingParameter: If user id or locale is missing.
        StoreFailure: If the stored progress cannot be read.
    """
    user_id = require_param(user_id, "Unable to find the user id.")
    locale = require_param(locale, "Unable to find the user locale.")

    lang = resolve_language(
        locale,
        settings.DEFAULT_LANG,
        settings.LOCALE_LANGUAGE_ENABLED,
    )

    last_index = parse_question_id(last_question_id)
    if last_index is None:
        last_index = store.get_last_question_id(user_id)
        logger.debug(
            "Using stored last question id",
            extra={"user_id": user_id, "last_question_id": last_index},
        )

    next_index = last_index + 1

    question = catalog.get(next_index)
    if question is None:
        return _end_of_test(f"The question {next_index} doesn't exist.")

    label = question.label(lang, settings.DEFAULT_LANG)
    if label is None:
        return _end_of_test(f"The question {next_index} has no label.")

    logger.info(
        "Serving next question",
        extra={"user_id": user_id, "question_id": next_index, "lang": lang},
    )

    return {
        "isComplete": False,
        "questionId": next_index,
        "questionText": label,
    }


def save_answer(
    catalog: QuestionCatalog,
    store: ProgressStore,
    settings: Settings,
    user_id: Optional[str],
    locale: Optional[str],
    question_id: Optional[str],
    user_answer: Optional[str],
) -> None:
    """
    Save a user's answer and advance their last question id.

    Args:
        catalog (QuestionCatalog): Shared question catalog.
        store (ProgressStore): User progress store.
        settings (Settings): Application settings.
        user_id (Optional[str]): Chat platform user identifier.
        locale (Optional[str]): User locale.
        question_id (Optional[str]): Answered question id.
        user_answer (Optional[str]): Localized answer text.

    Raises:
        MissingParameter: If any field is missing.
        InvalidParameter: If the question id is not an integer or not
            in the catalog, or the answer is unknown while strict
            answers are enabled.
        StoreFailure: If the record cannot be written.
    """
    user_id = require_param(user_id, "Unable to find the user id.")
    locale = require_param(locale, "Unable to find the user locale.")
    question_id = require_param(question_id, "Unable to find the question ID.")
    user_answer = require_param(user_answer, "Unable to find the user answer.")

    question_index = parse_question_id(question_id)
    if question_index is None:
        message = "Unable to parse the question ID."
        logger.warning(message, extra={"question_id": question_id})
        raise InvalidParameter(message)

    if catalog.get(question_index) is None:
        message = f"Unknown question ID: {question_index}"
        logger.warning(message, extra={"question_id": question_id})
        raise InvalidParameter(message)

    lang = resolve_language(
        locale,
        settings.DEFAULT_LANG,
        settings.LOCALE_LANGUAGE_ENABLED,
    )

    answer_code = get_answer_code(
        catalog,
        lang,
        user_answer,
        settings.DEFAULT_LANG,
    )

    if answer_code is UNKNOWN_ANSWER_CODE:
        if settings.STRICT_ANSWERS:
            message = f"Unknown answer: {user_answer}"
            logger.warning(message, extra={"user_id": user_id, "lang": lang})
            raise InvalidParameter(message)

        logger.warning(
            "Unknown answer phrase stored without code",
            extra={"user_id": user_id, "lang": lang, "answer": user_answer},
        )

    logger.info(
        "Saving answer",
        extra={
            "user_id": user_id,
            "question_id": question_index,
            "answer_code": answer_code,
        },
    )

    store.update_progress(
        user_id,
        {
            LAST_QUESTION_FIELD: question_index,
            str(question_index): answer_code,
        },
    )
