"""Execute interface for the mdqcm callable protocol.

Provides an in-proc execute() function for orchestrators that call the
converter directly instead of going through the CLI.
"""

from __future__ import annotations

from typing import Any

from mdqcm.callable.result import CallableResult, ConversionStats
from mdqcm.config import default_parse_options
from mdqcm.core.models import ParseOptions, Questionnaire
from mdqcm.parsing.markdown import parse
from mdqcm.parsing.structured import parse_structured
from mdqcm.serialization.document import questionnaire_from_dict, questionnaire_to_dict
from mdqcm.serialization.markdown import serialize, suggested_filename


def _resolve_options(config: dict[str, Any]) -> ParseOptions:
    """Merge per-call overrides onto the global defaults."""
    defaults = default_parse_options()
    overrides = ParseOptions.model_validate(config)
    return defaults.model_copy(update=overrides.model_dump(exclude_unset=True))


def _stats(questionnaire: Questionnaire) -> ConversionStats:
    return ConversionStats(
        questions=len(questionnaire.questions),
        answers=sum(len(q.answers) for q in questionnaire.questions),
        total_score=questionnaire.total_score,
        multiple_answer_questions=sum(
            1 for q in questionnaire.questions if q.multiple_answers
        ),
    )


def execute(params: dict[str, Any]) -> dict[str, Any]:
    """Convert between Markdown and structured questionnaires.

    Args:
        params: Dictionary containing:
            - operation: str - "parse", "parse_structured" or "serialize"
            - input: The payload for the operation:
                - parse: Markdown text
                - parse_structured: list of raw question records, or a dict
                  with "questions" and an optional "title"
                - serialize: questionnaire document dict
            - config: dict - Optional overrides of the global options:
                - enforceSingle: bool
                - requireAtLeastOneCorrect: bool

    Returns:
        CallableResult dict with:
            - schema_version: "1.0"
            - operation: the operation run
            - items: list with one document
            - stats: question/answer/score counts

    Raises:
        ValueError: If required parameters are missing or invalid.
        QCMError: Any parse or constraint error from the core.
    """
    operation = params.get("operation")
    if not operation:
        raise ValueError("'operation' is required in params")

    if "input" not in params:
        raise ValueError("'input' is required in params")
    payload = params["input"]

    options = _resolve_options(params.get("config") or {})

    if operation == "parse":
        if not isinstance(payload, str):
            raise ValueError("'input' must be Markdown text for operation 'parse'")
        questionnaire = parse(payload, options)
        items = [questionnaire_to_dict(questionnaire)]
    elif operation == "parse_structured":
        title = None
        records = payload
        if isinstance(payload, dict):
            title = payload.get("title")
            records = payload.get("questions")
            if title is not None and not isinstance(title, str):
                raise ValueError("'title' must be a string for operation 'parse_structured'")
        if not isinstance(records, list):
            raise ValueError(
                "'input' must be a list of records or a dict with 'questions' "
                "for operation 'parse_structured'"
            )
        questionnaire = parse_structured(records, options, title=title)
        items = [questionnaire_to_dict(questionnaire)]
    elif operation == "serialize":
        if not isinstance(payload, dict):
            raise ValueError("'input' must be a questionnaire dict for operation 'serialize'")
        questionnaire = questionnaire_from_dict(payload, options)
        items = [
            {
                "markdown": serialize(questionnaire),
                "filename": suggested_filename(questionnaire),
            }
        ]
    else:
        raise ValueError(f"Unknown operation: {operation}")

    result = CallableResult(
        operation=operation,
        items=items,
        stats=_stats(questionnaire),
    )
    return result.to_dict()
