"""Questionnaire to Markdown serializer.

Output is canonical: the score is always written, answers keep their
order, and the document ends with exactly one newline. Parsing the output
gives back an equal Questionnaire.
"""

import re

from mdqcm.core.models import Answer, Question, Questionnaire

ILLEGAL_FILENAME_CHARS = re.compile(r'[/\\?%*:|"<>]')
WHITESPACE_RUN = re.compile(r"\s+")
DEFAULT_FILENAME = "qcm"


def _answer_line(answer: Answer) -> str:
    mark = "[x]" if answer.correct else "[ ]"
    return f"- {mark} {answer.text.strip()}"


def _question_lines(question: Question) -> list[str]:
    lines = [f"## Q: {question.title.strip()} [{question.score}]"]
    lines.extend(_answer_line(answer) for answer in question.answers)
    lines.append("")
    return lines


def serialize(questionnaire: Questionnaire) -> str:
    """Render a Questionnaire as Markdown.

    Args:
        questionnaire: The questionnaire to render. It is not modified.

    Returns:
        Markdown text ending with a single newline.
    """
    lines: list[str] = []

    title = (questionnaire.title or "").strip()
    if title:
        lines.append(f"# Title: {title}")
        lines.append("")

    for question in questionnaire.questions:
        lines.extend(_question_lines(question))

    return "\n".join(lines).rstrip() + "\n"


def suggested_filename(questionnaire: Questionnaire) -> str:
    """Derive a ``.md`` filename from the questionnaire title.

    Characters that are illegal on common filesystems are removed and
    whitespace runs become underscores. Falls back to ``qcm.md``.
    """
    base = (questionnaire.title or "").strip()
    base = ILLEGAL_FILENAME_CHARS.sub("", base)
    base = WHITESPACE_RUN.sub("_", base)
    return f"{base or DEFAULT_FILENAME}.md"
