"""Exceptions raised while parsing and validating questionnaires.

Every failure is fatal to the current call. The exceptions carry the
location of the problem as attributes so callers can report it however
they like; ``str(error)`` is already a readable message.
"""


class QCMError(Exception):
    """Base class for all questionnaire errors."""

    pass


class QCMSyntaxError(QCMError):
    """Raised when a line matches none of the recognized productions."""

    def __init__(self, line_number: int, line: str, reason: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        detail = reason or "unrecognized syntax"
        super().__init__(f"Line {line_number}: {detail}: {line!r}")


class OrderingError(QCMError):
    """Raised when an answer line appears before any question header."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Line {line_number}: answer without preceding question: {line!r}"
        )


class EmptyAnswersError(QCMError):
    """Raised when a question is closed without any answer."""

    def __init__(self, position: int, title: str) -> None:
        self.position = position
        self.title = title
        super().__init__(f'Question #{position} "{title}" has no answers')


class MalformedRecordError(QCMError):
    """Raised when a structured record fails its shape check."""

    def __init__(
        self,
        item_index: int,
        answer_index: int | None = None,
        expected: str | None = None,
    ) -> None:
        self.item_index = item_index
        self.answer_index = answer_index
        if answer_index is None:
            location = f"Item #{item_index}"
            expected = expected or "{title: str, answers: list}"
        else:
            location = f"Question #{item_index}, answer #{answer_index}"
            expected = expected or "{text: str, correct: bool | null}"
        super().__init__(f"{location} is malformed: expected {expected}")


class ConstraintError(QCMError):
    """Raised when a question violates an enabled ParseOptions constraint."""

    def __init__(
        self,
        position: int,
        title: str,
        constraint: str,
        correct_count: int,
    ) -> None:
        self.position = position
        self.title = title
        self.constraint = constraint
        self.correct_count = correct_count
        if constraint == "require_at_least_one_correct":
            detail = "has no correct answer"
        else:
            detail = f"has {correct_count} correct answers"
        super().__init__(f'Question #{position} "{title}" {detail} ({constraint})')
