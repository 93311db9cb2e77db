"""Configuration for vcs-stamp.

Layer order (later wins):
1) Defaults (``./version.go``, package ``main``)
2) TOML file: an explicit ``--config-file`` or ``vcs-stamp.toml`` in the
   working directory, keys under ``[stamp]`` or at the top level
3) Environment: ``VCS_STAMP_OUTPUT``, ``VCS_STAMP_PACKAGE``
4) Explicit overrides (CLI flags)
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

# Conditional TOML import: stdlib tomllib (3.11+) or fallback tomli (<3.11)
try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "vcs-stamp.toml"
ENV_PREFIX = "VCS_STAMP_"
ENV_OUTPUT = f"{ENV_PREFIX}OUTPUT"
ENV_PACKAGE = f"{ENV_PREFIX}PACKAGE"

DEFAULT_OUTPUT = Path("./version.go")
DEFAULT_PACKAGE = "main"

_GO_IDENTIFIER = re.compile(r"[^\W\d]\w*")


class StampConfig(BaseModel):
    """Effective settings for one generation run."""

    output: Path = Field(default=DEFAULT_OUTPUT, description="File to generate")
    package: str = Field(default=DEFAULT_PACKAGE, description="Go package of the generated file")

    model_config = ConfigDict(extra="forbid")

    @field_validator("package")
    @classmethod
    def validate_package(cls, v: str) -> str:
        if not _GO_IDENTIFIER.fullmatch(v):
            raise ValueError(f"not a valid Go package name: {v!r}")
        return v


class StampConfigLoader:
    """Load StampConfig from file, environment and overrides."""

    @staticmethod
    def _read_toml_file(path: Path) -> Dict[str, Any]:
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load TOML from {path}: {e}") from e

        section = data.get("stamp", data)
        if not isinstance(section, dict):
            raise ConfigError(f"[stamp] must be a table: {path}")
        return dict(section)

    @staticmethod
    def _apply_environment_overrides(
        config: Dict[str, Any], environ: Mapping[str, str]
    ) -> Dict[str, Any]:
        result = config.copy()
        if environ.get(ENV_OUTPUT):
            result["output"] = environ[ENV_OUTPUT]
        if environ.get(ENV_PACKAGE):
            result["package"] = environ[ENV_PACKAGE]
        return result

    @classmethod
    def load(
        cls,
        *,
        cwd: Path,
        config_file: Optional[Path] = None,
        output: Optional[Path] = None,
        package: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> StampConfig:
        data: Dict[str, Any] = {}
        if config_file is not None:
            data = cls._read_toml_file(config_file)
        elif (cwd / CONFIG_FILENAME).is_file():
            data = cls._read_toml_file(cwd / CONFIG_FILENAME)
            logger.debug("loaded %s", cwd / CONFIG_FILENAME)

        data = cls._apply_environment_overrides(data, os.environ if environ is None else environ)
        if output is not None:
            data["output"] = output
        if package is not None:
            data["package"] = package

        try:
            return StampConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
