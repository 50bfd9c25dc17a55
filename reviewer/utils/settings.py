"""
Runtime settings for the resume reviewer.

Loads the packaged reviewer.yaml with OmegaConf. Values interpolate from the
environment (``${oc.env:...}``) when accessed, so a .env file or exported
variables take effect without editing the YAML.

Examples:
    >>> settings = load_settings()
    >>> settings.gemini.model
    'gemini-2.5-flash'
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "reviewer.yaml"
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def config_path() -> Path:
    """Settings file location, honoring REVIEWER_CONFIG_PATH."""
    override = os.getenv("REVIEWER_CONFIG_PATH")
    return Path(override) if override else DEFAULT_CONFIG_PATH


def load_settings(path: Path = None) -> DictConfig:
    """
    Load reviewer settings.

    Args:
        path: Optional settings file (defaults to REVIEWER_CONFIG_PATH or the packaged file)

    Returns:
        DictConfig whose env-backed values resolve on access
    """
    if path is None:
        path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    return OmegaConf.load(path)
