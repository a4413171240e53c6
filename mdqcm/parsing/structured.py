"""Ingestion of already-structured question records.

Some editors hand over a list of dicts instead of Markdown. This path gives
them the same normalization (trimming, score extraction) and the same
finalizer guarantees without a round-trip through text.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from mdqcm.core.errors import EmptyAnswersError, MalformedRecordError
from mdqcm.core.models import Answer, ParseOptions, Question, Questionnaire
from mdqcm.parsing.titles import split_score
from mdqcm.validation.finalizer import finalize

logger = logging.getLogger(__name__)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _parse_answer(raw: Any, item_index: int, answer_index: int) -> Answer:
    if not isinstance(raw, Mapping) or not isinstance(raw.get("text"), str):
        raise MalformedRecordError(item_index, answer_index)

    # bool only: 0/1 and "true" are rejected
    correct = raw.get("correct")
    if correct is not None and not isinstance(correct, bool):
        raise MalformedRecordError(item_index, answer_index)

    return Answer(text=raw["text"].strip(), correct=correct is True)


def _parse_item(raw: Any, item_index: int) -> Question:
    if (
        not isinstance(raw, Mapping)
        or not isinstance(raw.get("title"), str)
        or not _is_sequence(raw.get("answers"))
    ):
        raise MalformedRecordError(item_index)

    title, score = split_score(raw["title"])
    if score < 1:
        raise MalformedRecordError(item_index, expected="a positive [n] score")

    answers = [
        _parse_answer(answer, item_index, answer_index)
        for answer_index, answer in enumerate(raw["answers"], 1)
    ]
    if not answers:
        raise EmptyAnswersError(item_index, title)
    return Question(title=title, score=score, answers=answers)


def parse_structured(
    items: Sequence[Mapping[str, Any]],
    options: ParseOptions | None = None,
    title: str | None = None,
) -> Questionnaire:
    """Build a Questionnaire from raw question records.

    Each record looks like ``{"title": "Foo [2]", "answers": [{"text": "a",
    "correct": true}, ...]}``. A missing or null ``correct`` means False.

    Args:
        items: Raw question records in presentation order.
        options: Constraints for the finalizer.
        title: Optional global title for the resulting questionnaire.

    Returns:
        The normalized and finalized Questionnaire.

    Raises:
        MalformedRecordError: A record or one of its answers has the wrong shape.
        EmptyAnswersError: A record has no answers.
        ConstraintError: A question violates an enabled option.
    """
    if not _is_sequence(items):
        raise TypeError(f"items must be a sequence of records, got {type(items).__name__}")

    questions = [_parse_item(item, index) for index, item in enumerate(items, 1)]
    logger.debug("Parsed %d structured records", len(questions))

    if title is not None:
        title = title.strip() or None
    return Questionnaire(title=title, questions=finalize(questions, options))
