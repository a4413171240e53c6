"""Markdown to Questionnaire parser.

Supported syntax, one construct per line:

    # Title: <text>            optional global title (also ``# QCM:``)
    ## Q: <text> [n]           question header, ``[n]`` is the point value
    - [ ] <text>               wrong answer
    - [x] <text>               correct answer
    <!-- ... -->               comment, ignored
                               blank lines are ignored

The parser is strict and fail-fast: the first line that does not fit the
grammar raises an error carrying its 1-based line number.
"""

import logging
import re
from functools import reduce
from typing import NamedTuple

from mdqcm.core.errors import EmptyAnswersError, OrderingError, QCMSyntaxError
from mdqcm.core.models import Answer, ParseOptions, Question, Questionnaire
from mdqcm.parsing.titles import split_score
from mdqcm.validation.finalizer import finalize

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r?\n")
TITLE_LINE = re.compile(r"^#\s*(?:Title|QCM):", re.IGNORECASE)
QUESTION_LINE = re.compile(r"^##\s*Q:\s*(.+)$")
ANSWER_LINE = re.compile(r"^- \[([ xX])\]\s*(.+)$")
COMMENT_PREFIX = "<!--"


class _OpenQuestion(NamedTuple):
    """Question header seen, answers still being collected."""

    title: str
    score: int
    answers: tuple[Answer, ...] = ()

    def close(self) -> Question:
        return Question(title=self.title, score=self.score, answers=list(self.answers))


class _ParseState(NamedTuple):
    """Accumulator threaded through the fold over lines."""

    title: str | None = None
    questions: tuple[Question, ...] = ()
    current: _OpenQuestion | None = None

    def closed(self) -> tuple[Question, ...]:
        """All questions, including the open one if any."""
        if self.current is None:
            return self.questions
        return self.questions + (self.current.close(),)


def _step(state: _ParseState, numbered_line: tuple[int, str]) -> _ParseState:
    """Classify one line and return the next state."""
    line_number, raw_line = numbered_line
    line = raw_line.strip()

    # 1. Global title, first occurrence only
    if not state.title:
        title_match = TITLE_LINE.match(line)
        if title_match:
            title = line[title_match.end():].strip()
            return state._replace(title=title or None)

    # 2. Question header
    question_match = QUESTION_LINE.match(line)
    if question_match:
        title, score = split_score(question_match.group(1))
        if score < 1:
            raise QCMSyntaxError(line_number, raw_line, "score must be a positive integer")
        return _ParseState(
            title=state.title,
            questions=state.closed(),
            current=_OpenQuestion(title=title, score=score),
        )

    # 3. Answer line
    answer_match = ANSWER_LINE.match(line)
    if answer_match:
        if state.current is None:
            raise OrderingError(line_number, raw_line)
        answer = Answer(
            text=answer_match.group(2).strip(),
            correct=answer_match.group(1).lower() == "x",
        )
        current = state.current._replace(answers=state.current.answers + (answer,))
        return state._replace(current=current)

    # 4. Blank or comment
    if line == "" or line.startswith(COMMENT_PREFIX):
        return state

    # 5. Anything else
    raise QCMSyntaxError(line_number, raw_line)


def parse(text: str, options: ParseOptions | None = None) -> Questionnaire:
    """Parse Markdown text into a Questionnaire.

    Args:
        text: Raw Markdown document.
        options: Constraints for the finalizer (enforce_single,
            require_at_least_one_correct). Defaults to none.

    Returns:
        The parsed and finalized Questionnaire.

    Raises:
        QCMSyntaxError: A line matches no production.
        OrderingError: An answer appears before any question header.
        EmptyAnswersError: A question has no answers.
        ConstraintError: A question violates an enabled option.
    """
    lines = LINE_BREAK.split(text)
    state = reduce(_step, enumerate(lines, 1), _ParseState())
    questions = state.closed()

    for position, question in enumerate(questions, 1):
        if not question.answers:
            raise EmptyAnswersError(position, question.title)

    logger.debug(
        "Parsed %d lines into %d questions (title=%r)",
        len(lines),
        len(questions),
        state.title,
    )

    return Questionnaire(title=state.title, questions=finalize(questions, options))
