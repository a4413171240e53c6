"""Global configuration for mdqcm.

Settings are resolved in this order, later wins:

1. Built-in defaults (no constraint, output to the current directory)
2. ``config.yaml`` in the mdqcm home (``$MDQCM_HOME`` or ``~/.config/mdqcm``)
3. Environment variables (``MDQCM_ENFORCE_SINGLE``,
   ``MDQCM_REQUIRE_AT_LEAST_ONE_CORRECT``, ``MDQCM_OUTPUT_DIR``)

Command line flags override all of these.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from mdqcm.core.models import ParseOptions

CONFIG_FILENAME = "config.yaml"
TRUTHY = {"1", "true", "yes", "on"}


class GlobalConfig(BaseModel):
    """Settings loaded from config.yaml and the environment."""

    enforce_single: bool = False
    require_at_least_one_correct: bool = False
    output_dir: str | None = None


def get_mdqcm_home() -> Path:
    """Return the mdqcm home directory."""
    env_home = os.environ.get("MDQCM_HOME")
    if env_home:
        return Path(env_home)
    return Path.home() / ".config" / "mdqcm"


def get_config_path() -> Path:
    """Return the path of the global config file."""
    return get_mdqcm_home() / CONFIG_FILENAME


def _env_flag(name: str) -> bool | None:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return None
    return value.strip().lower() in TRUTHY


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load the global config, applying environment overrides.

    Args:
        path: Config file to read. Defaults to ``get_config_path()``.

    Returns:
        The resolved GlobalConfig. A missing file yields the defaults.

    Raises:
        ValueError: If the file exists but is not a YAML mapping.
    """
    config_path = path or get_config_path()
    data: dict[str, Any] = {}

    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")
        data = loaded or {}

    enforce_single = _env_flag("MDQCM_ENFORCE_SINGLE")
    if enforce_single is not None:
        data["enforce_single"] = enforce_single

    require_correct = _env_flag("MDQCM_REQUIRE_AT_LEAST_ONE_CORRECT")
    if require_correct is not None:
        data["require_at_least_one_correct"] = require_correct

    output_dir = os.environ.get("MDQCM_OUTPUT_DIR")
    if output_dir:
        data["output_dir"] = output_dir

    return GlobalConfig.model_validate(data)


def default_parse_options(config: GlobalConfig | None = None) -> ParseOptions:
    """Build ParseOptions from the global config."""
    config = config or load_global_config()
    return ParseOptions(
        enforce_single=config.enforce_single,
        require_at_least_one_correct=config.require_at_least_one_correct,
    )


def write_default_config(path: Path | None = None) -> Path:
    """Write a config.yaml holding the default settings.

    Returns:
        The path written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(GlobalConfig().model_dump(), f, sort_keys=False)
    return config_path
