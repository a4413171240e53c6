"""Tests for global configuration loading."""

from pathlib import Path

import pytest
import yaml

from mdqcm.config import (
    GlobalConfig,
    default_parse_options,
    get_config_path,
    get_mdqcm_home,
    load_global_config,
    write_default_config,
)


class TestConfigPaths:
    """Tests for home and config path resolution."""

    def test_home_from_env(self, isolated_home: Path) -> None:
        """Test MDQCM_HOME overrides the default home."""
        assert get_mdqcm_home() == isolated_home
        assert get_config_path() == isolated_home / "config.yaml"

    def test_default_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default home lives under ~/.config."""
        monkeypatch.delenv("MDQCM_HOME")

        assert get_mdqcm_home() == Path.home() / ".config" / "mdqcm"


class TestLoadGlobalConfig:
    """Tests for load_global_config()."""

    def test_missing_file_gives_defaults(self) -> None:
        """Test defaults when no config file exists."""
        assert load_global_config() == GlobalConfig()

    def test_reads_yaml(self, isolated_home: Path) -> None:
        """Test values are read from config.yaml."""
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.yaml").write_text(
            "enforce_single: true\noutput_dir: /tmp/quizzes\n"
        )

        config = load_global_config()

        assert config.enforce_single is True
        assert config.require_at_least_one_correct is False
        assert config.output_dir == "/tmp/quizzes"

    def test_empty_file(self, isolated_home: Path) -> None:
        """Test an empty YAML file gives defaults."""
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.yaml").write_text("")

        assert load_global_config() == GlobalConfig()

    def test_rejects_non_mapping(self, isolated_home: Path) -> None:
        """Test a YAML list is rejected."""
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.yaml").write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="mapping"):
            load_global_config()

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("1", True), ("true", True), ("YES", True), ("on", True), ("0", False), ("no", False)],
    )
    def test_env_overrides_file(
        self,
        isolated_home: Path,
        monkeypatch: pytest.MonkeyPatch,
        value: str,
        expected: bool,
    ) -> None:
        """Test environment flags win over the file."""
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.yaml").write_text("require_at_least_one_correct: true\n")
        monkeypatch.setenv("MDQCM_REQUIRE_AT_LEAST_ONE_CORRECT", value)

        config = load_global_config()

        assert config.require_at_least_one_correct is expected

    def test_output_dir_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test MDQCM_OUTPUT_DIR sets the output directory."""
        monkeypatch.setenv("MDQCM_OUTPUT_DIR", "/srv/out")

        assert load_global_config().output_dir == "/srv/out"


class TestDefaults:
    """Tests for default_parse_options and write_default_config."""

    def test_default_parse_options(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test options follow the config."""
        monkeypatch.setenv("MDQCM_ENFORCE_SINGLE", "true")

        options = default_parse_options()

        assert options.enforce_single is True
        assert options.require_at_least_one_correct is False

    def test_write_default_config(self, isolated_home: Path) -> None:
        """Test the written file holds every default key."""
        path = write_default_config()

        assert path == isolated_home / "config.yaml"
        data = yaml.safe_load(path.read_text())
        assert data == {
            "enforce_single": False,
            "require_at_least_one_correct": False,
            "output_dir": None,
        }
        assert load_global_config() == GlobalConfig()
