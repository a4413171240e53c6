"""mdqcm: Markdown <-> structured converter for multiple-choice questionnaires."""

__version__ = "0.1.0"

from mdqcm.core import (
    Answer,
    ConstraintError,
    EmptyAnswersError,
    MalformedRecordError,
    OrderingError,
    ParseOptions,
    QCMError,
    QCMSyntaxError,
    Question,
    Questionnaire,
)
from mdqcm.parsing import parse, parse_structured
from mdqcm.serialization import serialize, suggested_filename
from mdqcm.validation import finalize

# Import callable protocol last, it pulls in every component
from mdqcm.callable import CallableResult, execute

__all__ = [
    "__version__",
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
    # Operations
    "finalize",
    "parse",
    "parse_structured",
    "serialize",
    "suggested_filename",
    # Callable
    "CallableResult",
    "execute",
]
