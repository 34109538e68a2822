"""Configuration loading."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .config_models import JournalConfig


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".moodjournal" / "config.yaml",
        Path.home() / "moodjournal" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config(config_path: Optional[Path] = None) -> JournalConfig:
    """Load configuration from file, falling back to defaults.

    Raises:
        ValueError: If the file is not valid YAML or fails validation
    """
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    if not isinstance(base_config, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(base_config).__name__}")

    try:
        return JournalConfig.from_dict(base_config)
    except ValidationError as e:
        raise ValueError(f"Config validation failed: {e}")


def write_default_config(config_path: Path) -> Path:
    """Write the default config as YAML; existing files are left alone."""
    config_path = Path(config_path).expanduser()
    if config_path.exists():
        return config_path
    config_path.parent.mkdir(parents=True, exist_ok=True)
    data = JournalConfig().model_dump(mode="json")
    with open(config_path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False)
    return config_path
