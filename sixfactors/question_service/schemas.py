from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NextQuestionAttributes(BaseModel):
    isComplete: bool
    questionId: int
    questionText: str


class NextQuestionResponse(BaseModel):
    set_attributes: NextQuestionAttributes


class ChatfuelMessage(BaseModel):
    text: str


class MessagesResponse(BaseModel):
    messages: List[ChatfuelMessage]


class SaveAnswerRequest(BaseModel):
    """
    Save-answer webhook body.

    Fields are optional here so that missing values are reported
    with the platform message envelope instead of a 422.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    user_id: Optional[str] = Field(None, alias="chatfuel user id")
    locale: Optional[str] = None
    question_id: Optional[str] = Field(None, alias="questionId")
    user_answer: Optional[str] = Field(None, alias="userAnswer")
