import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from kitsune_styles.rules.models import StylesConfig

CONFIG_ENV_VAR = "KITSUNE_STYLES_CONFIG"
DEFAULT_CONFIG_NAME = "kitsune-styles.yaml"


def find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_config_path(path: Path | str | None = None) -> Path:
    """Explicit path, else the environment variable, else the project root."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return find_project_root() / DEFAULT_CONFIG_NAME


def load_config(path: Path) -> StylesConfig:
    """
    Load and validate the configuration file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    Relative paths in the file are taken relative to the file itself.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    try:
        config = StylesConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e

    return config.resolved(path.resolve().parent)
