"""Configuration for BioForge.

Settings live in a JSON file (``~/.bioforge/config.json`` unless
``BIOFORGE_CONFIG`` points elsewhere) and are grouped in two sections:

    providers: which LLM provider handles text and image generation
    storage:   where the archive lives and whether raw LLM traffic is logged

A handful of environment variables override the file so a one-off run can
switch provider without editing it. API keys are never stored in the file;
they are read from the environment (optionally populated from ``.env``).
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError


logger = logging.getLogger(__name__)

ProviderName = Literal["openai", "claude"]

DEFAULT_HOME = Path.home() / ".bioforge"

ENV_OVERRIDES = {
    "BIOFORGE_TEXT_PROVIDER": ("providers", "text_provider"),
    "BIOFORGE_IMAGE_PROVIDER": ("providers", "image_provider"),
    "BIOFORGE_DATA_DIR": ("storage", "data_dir"),
}


class ProvidersConfig(BaseModel):
    """Provider selection for the two generation steps."""

    text_provider: ProviderName = "openai"
    image_provider: ProviderName = "openai"
    text_model: str | None = Field(
        default=None, description="Override the provider's default text model"
    )
    image_model: str | None = Field(
        default=None, description="Override the provider's default image model"
    )
    image_size: Literal["1024x1024", "1536x1024", "1024x1536"] = "1024x1024"


class StorageConfig(BaseModel):
    """Local storage locations."""

    data_dir: str = str(DEFAULT_HOME)
    log_requests: bool = False
    logs_dir: str = "./logs"

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()


class BioforgeConfig(BaseModel):
    """Top-level configuration."""

    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    @classmethod
    def load(cls, path: Path | None = None, apply_env: bool = True) -> "BioforgeConfig":
        """Load config from disk, falling back to defaults if the file is absent.

        A file that cannot be read, parsed or validated is ignored with a
        warning. Invalid environment overrides are ignored the same way.
        """
        path = path or config_path()
        data = _read_config_file(path)

        if apply_env:
            overridden = copy.deepcopy(data)
            for env_name, (section, key) in ENV_OVERRIDES.items():
                value = os.environ.get(env_name)
                if value:
                    overridden.setdefault(section, {})[key] = value
            try:
                return cls.model_validate(overridden)
            except ValidationError as e:
                logger.warning(f"Ignoring invalid BIOFORGE_* environment overrides: {e}")

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> Path:
        path = path or config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    def set_value(self, dotted_key: str, raw_value: str) -> "BioforgeConfig":
        """Return a copy with one ``section.key`` setting replaced.

        Raises:
            KeyError: If the key does not name a known setting.
            ValueError: If the value is invalid for that setting.
        """
        section, _, key = dotted_key.partition(".")
        sections = type(self).model_fields
        if section not in sections or not key:
            raise KeyError(dotted_key)
        section_model = getattr(self, section)
        if key not in type(section_model).model_fields:
            raise KeyError(dotted_key)

        value: Any = raw_value
        if raw_value.lower() in ("none", "null", ""):
            value = None
        elif raw_value.lower() in ("true", "false"):
            value = raw_value.lower() == "true"

        data = self.model_dump()
        data[section][key] = value
        try:
            return type(self).model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            raise ValueError(f"Invalid value for {dotted_key}: {first['msg']}") from e

    def flatten(self) -> dict[str, dict[str, Any]]:
        """Section -> {key: value} view used for display."""
        return self.model_dump()


def config_path() -> Path:
    override = os.environ.get("BIOFORGE_CONFIG")
    if override:
        return Path(override).expanduser()
    return DEFAULT_HOME / "config.json"


def get_api_key(provider: str) -> str:
    """Read the credential for a provider from the environment."""
    if provider == "openai":
        return os.environ.get("OPENAI_API_KEY", "")
    if provider == "claude":
        return os.environ.get("ANTHROPIC_API_KEY", "") or os.environ.get(
            "ANTHROPIC_ACCESS_TOKEN", ""
        )
    raise ValueError(f"Unknown provider: {provider}")


_config: BioforgeConfig | None = None


def get_config() -> BioforgeConfig:
    """Process-wide config, loaded on first use."""
    global _config
    if _config is None:
        _config = BioforgeConfig.load()
    return _config


def set_config(config: BioforgeConfig | None) -> None:
    """Replace (or with None, reset) the process-wide config."""
    global _config
    _config = config


def _read_config_file(path: Path) -> dict[str, Any]:
    """Raw settings from the config file, or {} when the file is unusable."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {path}: expected an object, got {type(data).__name__}")
        return {}
    try:
        BioforgeConfig.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid config file {path}: {e}")
        return {}
    return data
