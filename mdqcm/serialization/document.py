"""JSON document form of a Questionnaire.

The JSON document uses camelCase keys::

    {
        "title": "Sample",
        "questions": [
            {
                "title": "2+2?",
                "score": 2,
                "multipleAnswers": false,
                "answers": [{"text": "4", "correct": true}, ...]
            }
        ]
    }

``multipleAnswers`` is written for consumers but ignored on load: it is
always re-derived by the finalizer.
"""

import json
from typing import Any

from mdqcm.core.errors import EmptyAnswersError
from mdqcm.core.models import Answer, ParseOptions, Question, Questionnaire
from mdqcm.validation.finalizer import finalize


def questionnaire_to_dict(questionnaire: Questionnaire) -> dict[str, Any]:
    return questionnaire.model_dump(by_alias=True)


def _normalized(question: Question) -> Question:
    """Trim free text; score and correctness pass through."""
    return Question(
        title=question.title.strip(),
        score=question.score,
        answers=[
            Answer(text=answer.text.strip(), correct=answer.correct)
            for answer in question.answers
        ],
    )


def questionnaire_from_dict(
    data: dict[str, Any],
    options: ParseOptions | None = None,
) -> Questionnaire:
    """Load a JSON document, re-deriving ``multipleAnswers``.

    Free text is trimmed the same way the Markdown parser trims it.

    Raises:
        pydantic.ValidationError: If the document does not match the model.
        EmptyAnswersError: If a question has no answers.
        ConstraintError: If a question violates an enabled option.
    """
    questionnaire = Questionnaire.model_validate(data)

    for position, question in enumerate(questionnaire.questions, 1):
        if not question.answers:
            raise EmptyAnswersError(position, question.title.strip())

    questions: list[Question] = finalize(
        [_normalized(question) for question in questionnaire.questions], options
    )
    title = (questionnaire.title or "").strip() or None
    return Questionnaire(title=title, questions=questions)


def questionnaire_to_json(questionnaire: Questionnaire, indent: int | None = 2) -> str:
    return json.dumps(questionnaire_to_dict(questionnaire), indent=indent, ensure_ascii=False)


def questionnaire_from_json(text: str, options: ParseOptions | None = None) -> Questionnaire:
    return questionnaire_from_dict(json.loads(text), options)


def json_schema() -> dict[str, Any]:
    """JSON Schema of the document form, as emitted with aliases."""
    return Questionnaire.model_json_schema(by_alias=True)
