"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from mdqcm.core.models import Answer, Question, Questionnaire


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the mdqcm home at a temp dir and clear config env vars."""
    home = tmp_path / "mdqcm-home"
    monkeypatch.setenv("MDQCM_HOME", str(home))
    for name in (
        "MDQCM_ENFORCE_SINGLE",
        "MDQCM_REQUIRE_AT_LEAST_ONE_CORRECT",
        "MDQCM_OUTPUT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def sample_markdown() -> str:
    """The end-to-end sample document."""
    return "# Title: Sample\n## Q: 2+2? [2]\n- [x] 4\n- [ ] 5\n"


@pytest.fixture
def sample_questionnaire() -> Questionnaire:
    """A questionnaire with a single-answer and a multi-answer question."""
    return Questionnaire(
        title="General Knowledge Assessment",
        questions=[
            Question(
                title="What is the output of `typeof null`?",
                score=2,
                answers=[
                    Answer(text='"object"', correct=True),
                    Answer(text='"null"', correct=False),
                ],
            ),
            Question(
                title="Which are primitive types?",
                score=1,
                multiple_answers=True,
                answers=[
                    Answer(text="string", correct=True),
                    Answer(text="number", correct=True),
                    Answer(text="boolean", correct=True),
                    Answer(text="object", correct=False),
                ],
            ),
        ],
    )


@pytest.fixture
def raw_records() -> list[dict]:
    """Structured question records as an external editor would send them."""
    return [
        {
            "title": "  Capital of France? [3] ",
            "answers": [
                {"text": " Paris ", "correct": True},
                {"text": "Lyon", "correct": None},
                {"text": "Nice"},
            ],
        },
        {
            "title": "Even numbers",
            "answers": [
                {"text": "2", "correct": True},
                {"text": "4", "correct": True},
                {"text": "5", "correct": False},
            ],
        },
    ]
