"""Input/output utilities: reading sources and persisting generated files.

The core never touches the filesystem. This module is the collaborator that
writes serialized Markdown under its suggested filename and reads the JSON
and JSONL inputs of the structured ingestion path.
"""

import json
import logging
from pathlib import Path
from typing import Any

from mdqcm.core.models import Questionnaire
from mdqcm.serialization.document import questionnaire_to_json
from mdqcm.serialization.markdown import serialize, suggested_filename

logger = logging.getLogger(__name__)


def read_text(path: Path | str) -> str:
    """Read a UTF-8 text file."""
    with open(path, encoding="utf-8") as f:
        return f.read()


def read_jsonl(path: Path | str) -> list[dict[str, Any]]:
    """Read a JSONL file, one record per non-blank line.

    Raises:
        ValueError: If a line is not valid JSON.
    """
    records: list[dict[str, Any]] = []
    with open(path, encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON on line {line_num}: {e}") from e
    return records


def read_json(path: Path | str) -> Any:
    """Read a JSON file."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def read_structured(path: Path | str) -> list[dict[str, Any]]:
    """Read raw question records.

    ``.jsonl`` files hold one record per line, other files a JSON array.

    Raises:
        ValueError: If the file does not hold a list of records.
    """
    path = Path(path)
    if path.suffix == ".jsonl":
        return read_jsonl(path)

    data = read_json(path)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of question records in {path}")
    return data


def write_markdown(
    questionnaire: Questionnaire,
    directory: Path | str,
    filename: str | None = None,
) -> Path:
    """Serialize a questionnaire and write it to ``directory``.

    Args:
        questionnaire: The questionnaire to write.
        directory: Target directory, created if missing.
        filename: Override for the suggested filename.

    Returns:
        Path of the written file.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / (filename or suggested_filename(questionnaire))
    with open(path, "w", encoding="utf-8") as f:
        f.write(serialize(questionnaire))
    logger.info("Wrote %d questions to %s", len(questionnaire.questions), path)
    return path


def write_json(questionnaire: Questionnaire, path: Path | str) -> Path:
    """Write the JSON document form of a questionnaire."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(questionnaire_to_json(questionnaire) + "\n")
    logger.info("Wrote %d questions to %s", len(questionnaire.questions), path)
    return path
