"""Scaffold configuration.

Typed, immutable record of every option that drives project generation. The
record is built once per run from the prompting surface (or an answers file)
and passed unchanged to every generator. All field checks live here so that a
bad answer is rejected before anything touches the file system.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

DEFAULT_PORT = 3001
DEFAULT_API_VERSION = "v1"

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

PROJECT_NAME_REQUIRED = "Project name is required!"
PROJECT_NAME_CHARSET = (
    "Project name can only contain letters, numbers, hyphens, and underscores!"
)
SERVICE_NAME_REQUIRED = "Service name is required!"
API_VERSION_REQUIRED = "API version is required!"
PORT_INVALID = "Please enter a valid port number (1-65535)!"


# ---------------------------------------------------------------------------
# Single-value checks (shared by the model and the prompting surface)
# ---------------------------------------------------------------------------


def _check_project_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(PROJECT_NAME_REQUIRED)
    if not PROJECT_NAME_PATTERN.match(value):
        raise ValueError(PROJECT_NAME_CHARSET)
    return value


def _check_port(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(PORT_INVALID)
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValueError(PORT_INVALID) from None
    if not 1 <= port <= 65535:
        raise ValueError(PORT_INVALID)
    return port


def _check_required(value: str, message: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(message)
    return value


def validate_project_name(value: str) -> str:
    """Return the trimmed project name or raise :class:`ValidationError`."""
    try:
        return _check_project_name(value)
    except ValueError as exc:
        raise ValidationError("project_name", str(exc)) from None


def validate_port(value: Any) -> int:
    """Return *value* as a port number in 1-65535 or raise :class:`ValidationError`."""
    try:
        return _check_port(value)
    except ValueError as exc:
        raise ValidationError("default_port", str(exc)) from None


def validate_required(field: str, value: str, message: str) -> str:
    """Return the trimmed *value*, rejecting blank input for *field*."""
    try:
        return _check_required(value, message)
    except ValueError as exc:
        raise ValidationError(field, str(exc)) from None


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ScaffoldConfig(BaseModel):
    """All options selected for one generation run.

    ``use_morgan_logging`` is kept exactly as supplied; generators must read
    :attr:`morgan_enabled`, which also requires the logger.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    project_name: str = Field(..., description="Directory and package name")
    use_mongodb: bool = Field(default=True, description="Wire Mongoose and connectDB")
    use_logger: bool = Field(default=True, description="Generate the Winston logger")
    use_morgan_logging: bool = Field(
        default=True, description="Pipe HTTP request logs into the logger"
    )
    use_error_handler: bool = Field(
        default=True, description="Generate the global error handler middleware"
    )
    use_cors: bool = Field(default=True, description="Enable the cors middleware")
    service_name: str = Field(default="", description="Service name used in log lines")
    default_port: int = Field(default=DEFAULT_PORT, description="Port used when PORT is unset")
    api_version: str = Field(
        default=DEFAULT_API_VERSION, description="Version segment of the route namespace"
    )
    create_gitignore: bool = Field(default=True, description="Write a .gitignore")
    create_readme: bool = Field(default=True, description="Write a README.md")

    @model_validator(mode="before")
    @classmethod
    def _default_service_name(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and data.get("service_name") is None:
            data = {**data, "service_name": data.get("project_name", "")}
        return data

    @field_validator("project_name", mode="before")
    @classmethod
    def _validate_project_name(cls, value: Any) -> Any:
        return _check_project_name(value) if isinstance(value, str) else value

    @field_validator("service_name")
    @classmethod
    def _validate_service_name(cls, value: str) -> str:
        return _check_required(value, SERVICE_NAME_REQUIRED)

    @field_validator("api_version")
    @classmethod
    def _validate_api_version(cls, value: str) -> str:
        return _check_required(value, API_VERSION_REQUIRED)

    @field_validator("default_port", mode="before")
    @classmethod
    def _validate_port(cls, value: Any) -> int:
        return _check_port(value)

    # ------------------------------------------------------------------
    # Derived flags
    # ------------------------------------------------------------------

    @property
    def morgan_enabled(self) -> bool:
        """HTTP request logging is only wired when the logger exists."""
        return self.use_logger and self.use_morgan_logging

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration as an answers JSON file."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load and validate an answers JSON file.

        Raises:
            ValidationError: If the file is not a JSON object or any answer
                is invalid.
            OSError: If the file cannot be read.
        """
        return validate_answers(load_answers(path))


def load_answers(path: Path) -> dict[str, Any]:
    """Read the raw answers of a JSON file without validating them.

    Raises:
        ValidationError: If the file is not a JSON object.
        OSError: If the file cannot be read.
    """
    raw = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError("answers", f"not valid JSON ({exc.msg})") from None
    if not isinstance(data, dict):
        raise ValidationError("answers", "expected a JSON object")
    return data


def validate_answers(answers: Mapping[str, Any]) -> ScaffoldConfig:
    """Build a :class:`ScaffoldConfig` from raw answers.

    Args:
        answers: Mapping of field name to the raw answer (strings or bools
            as returned by the prompting surface).

    Returns:
        The validated, immutable configuration.

    Raises:
        ValidationError: Naming the first offending field.
    """
    try:
        return ScaffoldConfig.model_validate(dict(answers))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        loc = first.get("loc") or ("configuration",)
        raise ValidationError(str(loc[0]), _error_message(first)) from None


def _error_message(error: Mapping[str, Any]) -> str:
    """Prefer the message of our own ``ValueError`` over pydantic's wrapper."""
    ctx_error = (error.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    return str(error.get("msg", "invalid value"))
