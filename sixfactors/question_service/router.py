"""
Six factors webhook routes.

Called by Chatfuel JSON API blocks to serve questions and
record answers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import ValidationError

from sixfactors.config import Settings, get_settings
from sixfactors.core.errors import InvalidParameter
from sixfactors.core.dependencies import get_catalog, get_progress_store
from sixfactors.question_service.catalog import QuestionCatalog
from sixfactors.question_service.schemas import (
    MessagesResponse,
    NextQuestionResponse,
    SaveAnswerRequest,
)
from sixfactors.question_service.service import get_next_question, save_answer
from sixfactors.repositories.progress_repository import ProgressStore
from sixfactors.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Six Factors"])

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": MessagesResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessagesResponse},
}


async def read_save_answer_body(request: Request) -> SaveAnswerRequest:
    """
    Parse the save-answer body from JSON or form-encoded data.

    An unreadable body is treated as empty.

    Raises:
        InvalidParameter: If a field is neither a string nor a number.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            logger.warning("Malformed JSON body")
            data = {}
    else:
        data = dict(await request.form())

    if not isinstance(data, dict):
        data = {}

    try:
        return SaveAnswerRequest.model_validate(data)
    except ValidationError as exc:
        message = "Unable to read the request body."
        logger.warning(message, extra={"errors": exc.errors(include_url=False)})
        raise InvalidParameter(message) from exc


@router.get(
    "/sixfactorsGetNextQuestion",
    response_model=NextQuestionResponse,
    responses=ERROR_RESPONSES,
)
def next_question(
    user_id: Optional[str] = Query(None, alias="chatfuel user id"),
    question_id: Optional[str] = Query(None, alias="questionId"),
    locale: Optional[str] = Query(None),
    catalog: QuestionCatalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
    settings: Settings = Depends(get_settings),
) -> NextQuestionResponse:
    """
    Fetch the question following the user's last answered one.

    Args:
        user_id (Optional[str]): Chatfuel user id.
        question_id (Optional[str]): Last question id; read from the
            store when absent or not an integer.
        locale (Optional[str]): User locale.

    Returns:
        NextQuestionResponse: Chatfuel `set_attributes` payload.
    """
    logger.info(
        "Next question requested",
        extra={"user_id": user_id, "question_id": question_id, "locale": locale},
    )

    question = get_next_question(
        catalog,
        store,
        settings,
        user_id=user_id,
        locale=locale,
        last_question_id=question_id,
    )

    return NextQuestionResponse(set_attributes=question)


@router.post(
    "/sixfactorsSaveAnswer",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses=ERROR_RESPONSES,
)
def answer_question(
    payload: SaveAnswerRequest = Depends(read_save_answer_body),
    catalog: QuestionCatalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Save the user's answer to a question.

    Args:
        payload (SaveAnswerRequest): User id, locale, question id
            and answer text.

    Returns:
        Response: Empty 200 response.
    """
    logger.info(
        "Saving six factors answer",
        extra={"user_id": payload.user_id, "question_id": payload.question_id},
    )

    save_answer(
        catalog,
        store,
        settings,
        user_id=payload.user_id,
        locale=payload.locale,
        question_id=payload.question_id,
        user_answer=payload.user_answer,
    )

    return Response(status_code=status.HTTP_200_OK)
