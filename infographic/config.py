"""
Infographic Studio configuration.

Reads from ~/.agent-core/config.json and environment variables on every call,
so a rotated API key or a model switch takes effect on the next request
without restarting the process.

Environment:
  API_KEY / GEMINI_API_KEY / GOOGLE_API_KEY  credential (first non-empty wins)
  INFOGRAPHIC_TEXT_MODEL                     research model override
  INFOGRAPHIC_IMAGE_MODEL                    generation model override
  INFOGRAPHIC_EDIT_MODEL                     edit/fix model override
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# ── Models ──────────────────────────────────────────────────────
# Standard (non-preview) models to avoid permission issues.

TEXT_MODEL = "gemini-2.5-flash"
IMAGE_MODEL = "gemini-2.5-flash-image"
EDIT_MODEL = "gemini-2.5-flash-image"

API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY")

CONFIG_PATH = Path.home() / ".agent-core" / "config.json"


@dataclass
class InfographicConfig:
    """Configuration for research and image generation calls."""
    api_key: Optional[str] = None
    text_model: str = TEXT_MODEL
    image_model: str = IMAGE_MODEL
    edit_model: str = EDIT_MODEL
    # Sampling shared by generate, edit and fix
    temperature: float = 0.4
    top_k: int = 32
    top_p: float = 0.95

    def to_dict(self) -> dict:
        """Export config for logging/display (credential redacted)."""
        return {
            "api_key_set": bool(self.api_key),
            "text_model": self.text_model,
            "image_model": self.image_model,
            "edit_model": self.edit_model,
            "temperature": self.temperature,
            "top_k": self.top_k,
            "top_p": self.top_p,
        }


def _apply_file_config(config: InfographicConfig, config_path: Path):
    """Overlay the `infographic` and `gemini` sections of config.json."""
    try:
        data = json.loads(config_path.read_text())
    except (json.JSONDecodeError, IOError):
        return

    if not isinstance(data, dict):
        return

    section = data.get("infographic")
    if not isinstance(section, dict):
        section = {}
    for key in ("text_model", "image_model", "edit_model"):
        if section.get(key):
            setattr(config, key, section[key])
    if "temperature" in section:
        config.temperature = float(section["temperature"])
    if "top_k" in section:
        config.top_k = int(section["top_k"])
    if "top_p" in section:
        config.top_p = float(section["top_p"])

    gemini_cfg = data.get("gemini")
    if isinstance(gemini_cfg, dict) and gemini_cfg.get("api_key"):
        config.api_key = gemini_cfg["api_key"]


def get_api_key() -> Optional[str]:
    """Return the first non-empty API key from the environment."""
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


def get_infographic_config(config_path: Optional[Path] = None) -> InfographicConfig:
    """Load config from ~/.agent-core/config.json + env vars. Never cached."""
    config = InfographicConfig()

    path = config_path or CONFIG_PATH
    if path.exists():
        _apply_file_config(config, path)

    # Environment overrides
    env_key = get_api_key()
    if env_key:
        config.api_key = env_key

    if os.environ.get("INFOGRAPHIC_TEXT_MODEL"):
        config.text_model = os.environ["INFOGRAPHIC_TEXT_MODEL"]

    if os.environ.get("INFOGRAPHIC_IMAGE_MODEL"):
        config.image_model = os.environ["INFOGRAPHIC_IMAGE_MODEL"]

    if os.environ.get("INFOGRAPHIC_EDIT_MODEL"):
        config.edit_model = os.environ["INFOGRAPHIC_EDIT_MODEL"]

    return config
