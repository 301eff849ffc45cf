"""Invocation configuration for boundary-cancel.

Defines the execution context supplied by the job framework and the resolved
per-invocation settings used to talk to the Boundary controller.

Example usage:
    context = ActionContext.from_environ()
    config = resolve_config(params, context)
"""

from __future__ import annotations

__all__ = [
    "ActionContext",
    "BoundaryConfig",
    "describe_validation_error",
    "resolve_config",
]

import os
from typing import Any, Mapping

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from boundary_cancel.constants import (
    ADDRESS_ENV,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    HTTP_TIMEOUT_ENV,
    MAX_HTTP_TIMEOUT_SECONDS,
    MIN_HTTP_TIMEOUT_SECONDS,
    PASSWORD_SECRET,
    STEP_DELAY_SECONDS,
    USERNAME_SECRET,
)
from boundary_cancel.exceptions import fatal_error
from boundary_cancel.utils.validation import is_valid_http_url


class ActionContext(BaseModel):
    """Execution context handed to every handler by the job framework.

    Attributes:
        secrets: Secret values keyed by name (credentials).
        environment: Non-secret settings keyed by name (controller address).
    """

    secrets: dict[str, str] = Field(default_factory=dict)
    environment: dict[str, str] = Field(default_factory=dict)

    @field_validator("secrets", "environment", mode="before")
    @classmethod
    def _keep_string_values(cls, value: Any) -> Any:
        # Non-string entries count as absent; missing secrets are reported by resolve_config
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return {key: item for key, item in value.items() if isinstance(key, str) and isinstance(item, str)}
        return value

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "ActionContext":
        """Build a context from process environment variables.

        Credentials go to secrets, everything else relevant to environment.
        """
        environ = os.environ if environ is None else environ
        secret_keys = (USERNAME_SECRET, PASSWORD_SECRET)
        env_keys = (ADDRESS_ENV, HTTP_TIMEOUT_ENV)
        return cls(
            secrets={key: environ[key] for key in secret_keys if key in environ},
            environment={key: environ[key] for key in env_keys if key in environ},
        )


class BoundaryConfig(BaseModel):
    """Resolved settings for one invocation.

    Attributes:
        base_url: Controller URL without trailing slash.
        username: Password auth method login name.
        password: Password auth method password.
        timeout_seconds: Per-request HTTP timeout.
        step_delay_seconds: Pause between protocol steps (0 disables).
    """

    base_url: str = Field(min_length=1)
    username: SecretStr
    password: SecretStr
    timeout_seconds: float = Field(
        default=DEFAULT_HTTP_TIMEOUT_SECONDS,
        ge=MIN_HTTP_TIMEOUT_SECONDS,
        le=MAX_HTTP_TIMEOUT_SECONDS,
    )
    step_delay_seconds: float = Field(default=STEP_DELAY_SECONDS, ge=0)

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not is_valid_http_url(value):
            raise ValueError("base_url must start with http:// or https://")
        return value


def resolve_config(
    params: Mapping[str, Any],
    context: ActionContext,
    *,
    step_delay_seconds: float = STEP_DELAY_SECONDS,
) -> BoundaryConfig:
    """Resolve credentials and controller address for an invocation.

    The address comes from the `address` parameter, falling back to the
    ADDRESS environment value.

    Args:
        params: Invocation parameters.
        context: Framework-supplied secrets and environment.
        step_delay_seconds: Pause between protocol steps.

    Returns:
        Validated BoundaryConfig.

    Raises:
        ActionError: Fatal, if secrets or address are missing or invalid.
    """
    username = context.secrets.get(USERNAME_SECRET)
    password = context.secrets.get(PASSWORD_SECRET)
    if not username or not password:
        raise fatal_error(f"Missing required secrets: {USERNAME_SECRET} and {PASSWORD_SECRET}")

    address = params.get("address") or context.environment.get(ADDRESS_ENV)
    if not isinstance(address, str) or not address.strip():
        raise fatal_error(
            f"No URL specified. Provide address parameter or {ADDRESS_ENV} environment variable"
        )

    settings: dict[str, Any] = {
        "base_url": address,
        "username": username,
        "password": password,
        "step_delay_seconds": step_delay_seconds,
    }
    timeout = context.environment.get(HTTP_TIMEOUT_ENV)
    if timeout:
        settings["timeout_seconds"] = timeout

    try:
        return BoundaryConfig(**settings)
    except ValidationError as e:
        raise fatal_error(f"Invalid configuration: {describe_validation_error(e)}") from e


def describe_validation_error(error: ValidationError) -> str:
    """Summarize a ValidationError by field location and message.

    Input values are left out; they may hold secrets.
    """
    return "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors())
