"""Core data model and error taxonomy shared by every component."""

from mdqcm.core.errors import (
    ConstraintError,
    EmptyAnswersError,
    MalformedRecordError,
    OrderingError,
    QCMError,
    QCMSyntaxError,
)
from mdqcm.core.models import Answer, ParseOptions, Question, Questionnaire

__all__ = [
    # Models
    "Answer",
    "ParseOptions",
    "Question",
    "Questionnaire",
    # Errors
    "ConstraintError",
    "EmptyAnswersError",
    "MalformedRecordError",
    "OrderingError",
    "QCMError",
    "QCMSyntaxError",
]
