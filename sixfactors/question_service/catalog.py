"""
Six factors question catalog.

Holds the ordered questions and the answer-code table. Built once
at application startup and shared read-only between requests.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from sixfactors.question_service.data import (
    SIXFACTORS_ANSWER_CODES,
    SIXFACTORS_QUESTIONS,
)
from sixfactors.utils.logger import get_logger

logger = get_logger(__name__)


class Question(BaseModel):
    """A single questionnaire item; `id` is its position in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: int
    factor: str
    labels: Dict[str, str]

    def label(self, lang: str, default_lang: str) -> Optional[str]:
        """
        Return the label in `lang`, falling back to `default_lang`.

        Args:
            lang (str): Requested language tag.
            default_lang (str): Fallback language tag.

        Returns:
            Optional[str]: Label text, or None if neither language exists.
        """
        text = self.labels.get(lang)
        if text is None:
            text = self.labels.get(default_lang)
        return text


class QuestionCatalog:
    """Immutable ordered question list plus answer-code lookup."""

    def __init__(
        self,
        questions: Tuple[Question, ...],
        answer_codes: Mapping[str, Mapping[str, int]],
    ):
        self._questions = questions
        self._answer_codes = MappingProxyType(
            {lang: MappingProxyType(dict(codes)) for lang, codes in answer_codes.items()}
        )

    def __len__(self) -> int:
        return len(self._questions)

    def get(self, index: int) -> Optional[Question]:
        """Return the question at `index`, or None when out of range."""
        if 0 <= index < len(self._questions):
            return self._questions[index]
        return None

    @property
    def languages(self) -> List[str]:
        return sorted(self._answer_codes)

    def answer_codes(self, lang: str) -> Optional[Mapping[str, int]]:
        """Return the phrase -> code table for `lang`, if any."""
        return self._answer_codes.get(lang)


def build_catalog(
    questions: Optional[List[dict]] = None,
    answer_codes: Optional[Dict[str, Dict[str, int]]] = None,
) -> QuestionCatalog:
    """
    Build the question catalog.

    Args:
        questions (Optional[List[dict]]): Question definitions with
            `factor` and `label` keys. Defaults to the six factors set.
        answer_codes (Optional[Dict]): Per-language answer code table.

    Returns:
        QuestionCatalog: Catalog ready to be shared between requests.
    """
    if questions is None:
        questions = SIXFACTORS_QUESTIONS
    if answer_codes is None:
        answer_codes = SIXFACTORS_ANSWER_CODES

    items = tuple(
        Question(id=index, factor=item["factor"], labels=item["label"])
        for index, item in enumerate(questions)
    )

    logger.info(
        "Question catalog built",
        extra={"questions": len(items), "languages": sorted(answer_codes)},
    )

    return QuestionCatalog(items, answer_codes)
