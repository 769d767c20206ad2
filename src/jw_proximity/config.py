from __future__ import annotations

"""Settings model and loader for the Winkler adjustment constants."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

CONFIG_ENV_VAR = "JW_PROXIMITY_CONFIG"


class ProximitySettings(BaseModel):
    """Constants controlling the Winkler prefix boost.

    The boost is only applied when the Jaro weight is strictly above
    ``weight_threshold``. Winkler's paper used 0.7, a four unit prefix and a
    scaling factor of 0.1.
    """

    weight_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    prefix_size: int = Field(default=4, ge=0)
    prefix_scale: float = Field(default=0.1, ge=0.0, le=0.25)

    @model_validator(mode="after")
    def _boost_stays_in_range(self) -> "ProximitySettings":
        if self.prefix_scale * self.prefix_size > 1.0:
            raise ValueError(
                "prefix_scale * prefix_size must not exceed 1.0 "
                f"(got {self.prefix_scale} * {self.prefix_size})"
            )
        return self


DEFAULT_SETTINGS = ProximitySettings()


class SettingsNotFoundError(FileNotFoundError):
    """Raised when a settings file cannot be located."""


def load_settings(path: Path) -> ProximitySettings:
    """Load settings from a YAML file; an empty file yields the defaults."""

    if not path.exists():
        raise SettingsNotFoundError(f"Settings file not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    try:
        return ProximitySettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings in {path}: {exc}") from exc
