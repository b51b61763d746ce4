"""Per-operation optimization settings."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILE_NAME, DEFAULT_COMPRESSION_LEVEL, MAX_COMPRESSION_LEVEL, MIN_COMPRESSION_LEVEL
from ...utils.get_home_dir import get_home_dir
from ..errors.DeltaConfigError import DeltaConfigError


class OptimizationConfig(BaseModel):
    """Tunables for a single produce/apply call.

    Instances are immutable and passed explicitly to each operation.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    compression_level: int = Field(
        DEFAULT_COMPRESSION_LEVEL,
        ge=MIN_COMPRESSION_LEVEL,
        le=MAX_COMPRESSION_LEVEL,
        description="zstd compression level for the patch stream",
    )
    use_fast_temp_dir: bool = Field(True, description="Stage outputs in a memory-backed directory when available")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OptimizationConfig":
        """Build a config from a plain dict, reporting every invalid field.

        Raises:
            DeltaConfigError: If a field violates its constraints or is unknown
        """
        if not isinstance(data, dict):
            raise DeltaConfigError(
                f"optimization config must be a dict (found: {type(data).__name__}, expected: dict)"
            )
        try:
            return cls(**data)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                loc = ".".join(str(x) for x in error.get("loc", ()))
                msg = error.get("msg", str(e))
                errors.append(f"{loc}: {msg}" if loc else msg)
            raise DeltaConfigError(errors) from e

    @classmethod
    def from_file(cls, path: str | Path) -> "OptimizationConfig":
        """Load the ``optimization`` section of a JSON config file.

        A missing section yields the defaults.

        Raises:
            DeltaConfigError: If the file is missing, not JSON, or invalid
        """
        path = Path(path)
        if not path.exists():
            raise DeltaConfigError(f"Configuration file not found at {path}", path)

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise DeltaConfigError(f"Invalid JSON in config file {path}: {e}", path) from e

        if not isinstance(raw, dict):
            raise DeltaConfigError(f"Config file {path} must contain a JSON object", path)
        return cls.from_dict(raw.get("optimization", {}))

    @classmethod
    def load(cls) -> "OptimizationConfig":
        """Load from ``$DELTAPIPE_HOME/config.json``, or defaults when no file exists."""
        path = get_home_dir(CONFIG_FILE_NAME)
        if not path.exists():
            return cls()
        return cls.from_file(path)
