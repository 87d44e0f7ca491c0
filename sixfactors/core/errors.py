"""
Error taxonomy for the questionnaire webhooks.

Every error carries the text returned to the chat platform
inside a Chatfuel message envelope.
"""


class QuestionnaireError(Exception):
    """Base class for errors reported back to the chat platform."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameter(QuestionnaireError):
    """A required request parameter is absent or empty."""

    status_code = 400


class InvalidParameter(QuestionnaireError):
    """A request parameter is present but cannot be interpreted."""

    status_code = 400


class StoreFailure(QuestionnaireError):
    """Reading or writing the user progress store failed."""

    status_code = 500
