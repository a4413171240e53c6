"""Output formats: canonical Markdown and the JSON document."""

from mdqcm.serialization.document import (
    json_schema,
    questionnaire_from_dict,
    questionnaire_from_json,
    questionnaire_to_dict,
    questionnaire_to_json,
)
from mdqcm.serialization.markdown import serialize, suggested_filename

__all__ = [
    "serialize",
    "suggested_filename",
    "json_schema",
    "questionnaire_from_dict",
    "questionnaire_from_json",
    "questionnaire_to_dict",
    "questionnaire_to_json",
]
