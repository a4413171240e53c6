"""Tests for the execute() interface."""

import pytest

from mdqcm import ConstraintError, OrderingError, execute, parse
from mdqcm.core.models import Questionnaire
from mdqcm.serialization import questionnaire_to_dict


class TestExecuteParse:
    """Tests for the parse operations."""

    def test_parse_returns_document(self, sample_markdown: str) -> None:
        """Test parse returns one camelCase questionnaire document."""
        result = execute({"operation": "parse", "input": sample_markdown})

        assert result["schema_version"] == "1.0"
        assert result["operation"] == "parse"
        assert result["items"][0]["questions"][0]["multipleAnswers"] is False
        assert result["stats"] == {
            "questions": 1,
            "answers": 2,
            "total_score": 2,
            "multiple_answer_questions": 0,
        }

    def test_parse_config_override(self) -> None:
        """Test per-call config enables constraints."""
        params = {
            "operation": "parse",
            "input": "## Q: q\n- [x] a\n- [x] b\n",
            "config": {"enforceSingle": True},
        }

        with pytest.raises(ConstraintError):
            execute(params)

    def test_parse_global_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test global config applies when no override is given."""
        monkeypatch.setenv("MDQCM_REQUIRE_AT_LEAST_ONE_CORRECT", "true")

        with pytest.raises(ConstraintError):
            execute({"operation": "parse", "input": "## Q: q\n- [ ] a\n"})

    def test_override_can_disable_global(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an explicit False override wins over the global config."""
        monkeypatch.setenv("MDQCM_REQUIRE_AT_LEAST_ONE_CORRECT", "true")

        result = execute({
            "operation": "parse",
            "input": "## Q: q\n- [ ] a\n",
            "config": {"requireAtLeastOneCorrect": False},
        })

        assert result["stats"]["questions"] == 1

    def test_parse_errors_propagate(self) -> None:
        """Test core errors are raised unchanged."""
        with pytest.raises(OrderingError):
            execute({"operation": "parse", "input": "- [x] orphan"})

    def test_parse_structured_list(self, raw_records: list[dict]) -> None:
        """Test a list of records is normalized."""
        result = execute({"operation": "parse_structured", "input": raw_records})

        document = result["items"][0]
        assert document["title"] is None
        assert document["questions"][0]["score"] == 3
        assert result["stats"]["multiple_answer_questions"] == 1

    def test_parse_structured_with_title(self, raw_records: list[dict]) -> None:
        """Test a dict payload carries the title."""
        result = execute({
            "operation": "parse_structured",
            "input": {"title": "Geo", "questions": raw_records},
        })

        assert result["items"][0]["title"] == "Geo"


class TestExecuteSerialize:
    """Tests for the serialize operation."""

    def test_serialize_returns_markdown_and_filename(
        self, sample_questionnaire: Questionnaire
    ) -> None:
        """Test serialize returns text that parses back."""
        result = execute({
            "operation": "serialize",
            "input": questionnaire_to_dict(sample_questionnaire),
        })

        item = result["items"][0]
        assert item["filename"] == "General_Knowledge_Assessment.md"
        assert parse(item["markdown"]) == sample_questionnaire
        assert result["stats"]["total_score"] == 3


class TestExecuteValidation:
    """Tests for parameter validation."""

    def test_missing_operation(self) -> None:
        """Test operation is required."""
        with pytest.raises(ValueError, match="'operation' is required"):
            execute({"input": ""})

    def test_missing_input(self) -> None:
        """Test input is required."""
        with pytest.raises(ValueError, match="'input' is required"):
            execute({"operation": "parse"})

    def test_unknown_operation(self) -> None:
        """Test unknown operations are rejected."""
        with pytest.raises(ValueError, match="Unknown operation"):
            execute({"operation": "compile", "input": ""})

    @pytest.mark.parametrize(
        ("operation", "payload"),
        [
            ("parse", ["not", "text"]),
            ("parse_structured", "## Q: text"),
            ("parse_structured", {"questions": "nope"}),
            ("parse_structured", {"title": 5, "questions": []}),
            ("serialize", "## Q: text"),
        ],
    )
    def test_wrong_input_type(self, operation: str, payload: object) -> None:
        """Test payloads of the wrong type raise ValueError."""
        with pytest.raises(ValueError):
            execute({"operation": operation, "input": payload})

    def test_non_string_title(self) -> None:
        """Test a non-string title is a parameter error, not a crash."""
        with pytest.raises(ValueError, match="'title' must be a string"):
            execute(
                {
                    "operation": "parse_structured",
                    "input": {"title": ["Quiz"], "questions": []},
                }
            )
