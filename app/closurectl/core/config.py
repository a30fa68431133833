"""Configuration model and I/O.

Configuration is stored in ~/.config/closurectl/config.toml. Every
field has a default, so a missing file simply yields the defaults;
command-line flags always take precedence over file values.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from closurectl.core.paths import DEFAULT_DESTINATION, get_config_path
from closurectl.errors import ConfigError, ConfigParseError

logger = logging.getLogger(__name__)

# Package oracle backend identifiers, in default preference order
PackageBackend = Literal["dpkg", "rpm"]
DEFAULT_BACKENDS: tuple[PackageBackend, ...] = ("dpkg", "rpm")


class ClosurectlConfig(BaseModel):
    """Settings for closure resolution and export.

    Attributes:
        destination: Directory the closure is unpacked into.
        package_backends: Package oracles to query, in preference order.
        remove: Removal patterns always applied at extraction time.
        oracle_timeout: Per-invocation limit for oracle subprocesses (None = unbounded).
    """

    model_config = ConfigDict(extra="forbid")

    destination: Annotated[
        Path,
        Field(description="Directory the closure is unpacked into"),
    ] = DEFAULT_DESTINATION
    package_backends: Annotated[
        list[PackageBackend],
        Field(min_length=1, description="Package oracles in preference order"),
    ] = list(DEFAULT_BACKENDS)
    remove: Annotated[
        list[str],
        Field(description="Extraction exclusion patterns applied on every export"),
    ] = []
    oracle_timeout: Annotated[
        float | None,
        Field(gt=0, description="Oracle subprocess timeout in seconds"),
    ] = None

    @field_validator("package_backends")
    @classmethod
    def _unique_backends(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            msg = "package_backends must not contain duplicates"
            raise ValueError(msg)
        return value

    def to_toml_dict(self) -> dict[str, object]:
        """Return a TOML-serializable representation (None values dropped)."""
        data = self.model_dump(mode="json")
        return {key: value for key, value in data.items() if value is not None}


def load_config(path: Path | None = None) -> ClosurectlConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ClosurectlConfig; defaults when the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return ClosurectlConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return ClosurectlConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: ClosurectlConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The configuration to save.
        path: Destination path. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.to_toml_dict(), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path
