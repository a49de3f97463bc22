from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class EnsureSettings(BaseModel):
    """Settings shared by every builder and performable.

    Attributes:
        absent_literal: How an absent (``None``) value is rendered in
            descriptions and failure messages.
        max_literal_length: Truncate rendered literals longer than this.
            ``0`` disables truncation.
        logger_name: Name of the logger performables write to.
        log_file: Optional debug log file. ``${VAR}`` references are expanded
            from the environment when the settings are validated.
        verbose: Also log to stderr.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    absent_literal: str = "None"
    max_literal_length: int = 0
    logger_name: str = "screenplay_ensure"
    log_file: str | None = None
    verbose: bool = False

    @field_validator("max_literal_length")
    @classmethod
    def max_literal_length_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_literal_length must be >= 0 (0 disables truncation)")
        return v

    @field_validator("logger_name")
    @classmethod
    def logger_name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("logger_name must not be blank")
        return v

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: str | None) -> str | None:
        """Expand ``${VAR}`` references in ``log_file``.

        Raises ValueError naming the unset variable rather than leaving a
        literal ``${VAR}`` in the path.
        """
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(
                f"log_file '{v}' references a missing environment variable: {e}"
            ) from e


DEFAULT_SETTINGS = EnsureSettings()


def load_settings(path: Path) -> EnsureSettings:
    """Load and validate settings from a YAML file.

    The file may hold the settings at the top level or under an ``ensure:`` key.
    """
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(raw).__name__}")
    if "ensure" in raw:
        raw = raw["ensure"] or {}

    settings = EnsureSettings(**raw)

    # Resolve a relative log file relative to the config file location
    if settings.log_file is not None:
        log_path = Path(settings.log_file)
        if not log_path.is_absolute():
            settings = settings.model_copy(
                update={"log_file": str((config_dir / log_path).resolve())}
            )

    return settings
