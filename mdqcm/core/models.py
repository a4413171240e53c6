"""Pydantic models for questionnaires, questions and answers.

Field names are snake_case in Python. The JSON representation uses the
camelCase aliases (``multipleAnswers``, ``enforceSingle``...), so dump with
``by_alias=True`` when talking to other tools.
"""

from pydantic import BaseModel, ConfigDict, Field


class Answer(BaseModel):
    """A single answer choice."""

    text: str
    correct: bool = False

    model_config = ConfigDict(frozen=True)


class Question(BaseModel):
    """A question with its point value and ordered answers.

    ``multiple_answers`` is derived by the finalizer from the answers; it is
    never taken from the source document.
    """

    title: str
    score: int = Field(default=1, gt=0)
    multiple_answers: bool = Field(default=False, alias="multipleAnswers")
    answers: list[Answer] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def correct_count(self) -> int:
        """Number of answers marked correct."""
        return sum(1 for answer in self.answers if answer.correct)


class Questionnaire(BaseModel):
    """A complete QCM: optional global title and ordered questions."""

    title: str | None = None
    questions: list[Question] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def total_score(self) -> int:
        """Sum of all question scores."""
        return sum(question.score for question in self.questions)


class ParseOptions(BaseModel):
    """Structural constraints applied by the finalizer."""

    enforce_single: bool = Field(default=False, alias="enforceSingle")
    require_at_least_one_correct: bool = Field(
        default=False, alias="requireAtLeastOneCorrect"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)
