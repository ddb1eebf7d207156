"""Application settings model."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from kuotacalc.constants.defaults import DEBUG_DEFAULT, DETAILED_DEFAULT, MAX_ROLLOUTS_DEFAULT
from kuotacalc.constants.values import ENV_DEBUG, ENV_DETAILED, ENV_MAX_ROLLOUTS
from kuotacalc.errors import SettingsError

_ENV_FIELDS: dict[str, str] = {
    ENV_MAX_ROLLOUTS: "max_rollouts",
    ENV_DETAILED: "detailed",
    ENV_DEBUG: "debug",
}


class CalcSettings(BaseModel):
    """Settings for one kuota-calc run with validation."""

    model_config = ConfigDict(frozen=True)

    # Simultaneous rollouts assumed by the total, negative for unlimited
    max_rollouts: int = MAX_ROLLOUTS_DEFAULT
    detailed: bool = DETAILED_DEFAULT
    debug: bool = DEBUG_DEFAULT

    @classmethod
    def load(
        cls,
        overrides: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> CalcSettings:
        """Build settings from environment defaults and explicit overrides.

        Args:
            overrides: Values set explicitly (CLI flags); ``None`` entries are
                ignored so unset flags fall back to the environment.
            environ: Environment mapping, ``os.environ`` when omitted.

        Raises:
            SettingsError: If a value fails validation.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {
            field: env[name] for name, field in _ENV_FIELDS.items() if env.get(name)
        }
        if overrides:
            values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise SettingsError(f"invalid settings: {exc}") from exc
