"""Finalizer shared by every ingestion path.

Derives ``multiple_answers`` from the answers and enforces the optional
constraints from :class:`ParseOptions`. Input questions are never mutated;
a fresh list of fresh questions is returned.
"""

import logging
from collections.abc import Sequence

from mdqcm.core.errors import ConstraintError
from mdqcm.core.models import ParseOptions, Question

logger = logging.getLogger(__name__)


def finalize(
    questions: Sequence[Question],
    options: ParseOptions | None = None,
) -> list[Question]:
    """Validate questions against options and derive ``multiple_answers``.

    Args:
        questions: Questions in presentation order.
        options: Constraints to enforce. Defaults to no constraint.

    Returns:
        New list of questions with ``multiple_answers`` recomputed.

    Raises:
        ConstraintError: If ``require_at_least_one_correct`` is set and a
            question has no correct answer, or ``enforce_single`` is set and
            a question has more than one.
    """
    options = options or ParseOptions()
    finalized: list[Question] = []

    for position, question in enumerate(questions, 1):
        correct_count = question.correct_count

        if options.require_at_least_one_correct and correct_count == 0:
            raise ConstraintError(
                position, question.title, "require_at_least_one_correct", correct_count
            )

        if options.enforce_single and correct_count > 1:
            raise ConstraintError(
                position, question.title, "enforce_single", correct_count
            )

        finalized.append(
            question.model_copy(
                update={
                    "multiple_answers": correct_count > 1,
                    "answers": list(question.answers),
                }
            )
        )

    logger.debug(
        "Finalized %d questions (%d with multiple answers)",
        len(finalized),
        sum(1 for q in finalized if q.multiple_answers),
    )
    return finalized
