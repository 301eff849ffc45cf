"""Job framework handlers for cancelling a Boundary session.

Three coroutines are exposed to the framework:

- invoke: validate -> authenticate -> read session version -> cancel
- error: re-raise a previously raised error so the framework applies its retry policy
- halt: acknowledge a halt without contacting the controller

Each controller call is made exactly once per invocation. Retries are the
framework's decision, driven by ActionError.retryable.
"""

from __future__ import annotations

__all__ = [
    "error",
    "halt",
    "invoke",
]

import asyncio
from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from boundary_cancel.boundary import authenticate, build_client, cancel_session, get_session
from boundary_cancel.config import ActionContext, BoundaryConfig, describe_validation_error, resolve_config
from boundary_cancel.constants import STEP_DELAY_SECONDS, UNKNOWN_VALUE
from boundary_cancel.exceptions import ActionError, fatal_error
from boundary_cancel.models import CancelResult, HaltResult
from boundary_cancel.telemetry import get_system_logger
from boundary_cancel.utils.logging.iso_formatter import utc_now_iso
from boundary_cancel.utils.validation import validate_inputs

ContextLike = ActionContext | Mapping[str, Any] | None


def _coerce_context(context: ContextLike) -> ActionContext:
    if isinstance(context, ActionContext):
        return context
    try:
        return ActionContext.model_validate(context or {})
    except ValidationError as e:
        raise fatal_error(f"Invalid context: {describe_validation_error(e)}") from e


async def _pause(seconds: float) -> None:
    if seconds > 0:
        await asyncio.sleep(seconds)


async def invoke(
    params: Mapping[str, Any],
    context: ContextLike,
    *,
    http_client: httpx.AsyncClient | None = None,
    step_delay_seconds: float = STEP_DELAY_SECONDS,
) -> dict[str, Any]:
    """Cancel the session named in params.

    Args:
        params: Must contain sessionId and authMethodId; may contain address.
        context: Secrets (BASIC_USERNAME, BASIC_PASSWORD) and environment (ADDRESS).
        http_client: Optional client (for testing). Caller keeps ownership.
        step_delay_seconds: Pause between protocol steps; 0 disables it.

    Returns:
        CancelResult as a camelCase dict.

    Raises:
        ActionError: Classified failure. Unclassified exceptions are wrapped
            as fatal "Unexpected error: ...".
    """
    logger = get_system_logger()
    logger.info({"event": "cancel_started", "message": "Starting HashiCorp Boundary cancel session action"})

    try:
        result = await _run(params, _coerce_context(context), http_client, step_delay_seconds)
    except ActionError as e:
        logger.error(
            {
                "event": "cancel_failed",
                "message": f"Error cancelling Boundary session: {e.message}",
                "kind": e.kind.value,
            }
        )
        raise
    except Exception as e:
        logger.error(
            {
                "event": "cancel_failed",
                "message": f"Error cancelling Boundary session: {e}",
                "error_type": type(e).__name__,
            }
        )
        raise fatal_error(f"Unexpected error: {e}") from e

    logger.info(
        {
            "event": "session_cancelled",
            "message": f"Successfully cancelled session: {result.session_id}",
            "session_id": result.session_id,
        }
    )
    return result.to_output()


async def _run(
    params: Mapping[str, Any],
    context: ActionContext,
    http_client: httpx.AsyncClient | None,
    step_delay_seconds: float,
) -> CancelResult:
    logger = get_system_logger()

    session_id, auth_method_id = validate_inputs(params)
    logger.info({"event": "processing_session", "message": f"Processing session ID: {session_id}"})

    config = resolve_config(params, context, step_delay_seconds=step_delay_seconds)

    client = http_client or build_client(config.timeout_seconds)
    owns_client = http_client is None
    try:
        await _cancel(session_id, auth_method_id, config, client)
    finally:
        if owns_client:
            await client.aclose()

    return CancelResult(
        session_id=session_id,
        auth_method_id=auth_method_id,
        cancelled_at=utc_now_iso(),
    )


async def _cancel(
    session_id: str,
    auth_method_id: str,
    config: BoundaryConfig,
    client: httpx.AsyncClient,
) -> None:
    logger = get_system_logger()

    logger.info(
        {"event": "authenticating", "message": f"Authenticating with auth method: {auth_method_id}"}
    )
    token = await authenticate(
        auth_method_id,
        config.username.get_secret_value(),
        config.password.get_secret_value(),
        config.base_url,
        http_client=client,
    )

    await _pause(config.step_delay_seconds)

    # Version must be read after authenticating and right before cancelling
    logger.info({"event": "reading_session", "message": f"Getting session details for: {session_id}"})
    version = await get_session(session_id, token, config.base_url, http_client=client)

    await _pause(config.step_delay_seconds)

    logger.info(
        {
            "event": "cancelling_session",
            "message": f"Cancelling session: {session_id} with version: {version}",
        }
    )
    await cancel_session(session_id, version, token, config.base_url, http_client=client)


async def error(params: Mapping[str, Any], context: ContextLike = None) -> None:
    """Re-raise the error the framework hands back.

    Retry and backoff decisions stay with the framework.

    Raises:
        BaseException: params["error"], unchanged.
        ActionError: Fatal, if no error was supplied.
    """
    err = params.get("error")
    get_system_logger().error(
        {"event": "error_handler_invoked", "message": f"Error handler invoked: {err}"}
    )
    if isinstance(err, BaseException):
        raise err
    if err is None:
        raise fatal_error("Error handler invoked without an error")
    raise fatal_error(str(err))


def _or_unknown(value: Any) -> str:
    if value is None or value == "":
        return UNKNOWN_VALUE
    return value if isinstance(value, str) else str(value)


async def halt(params: Mapping[str, Any] | None, context: ContextLike = None) -> dict[str, Any]:
    """Acknowledge a halt. No controller calls are made and nothing is raised.

    Missing identifiers and reason are reported as "unknown".
    """
    params = params or {}
    reason = _or_unknown(params.get("reason"))
    get_system_logger().info({"event": "halt_requested", "message": f"Job is being halted ({reason})"})

    return HaltResult(
        session_id=_or_unknown(params.get("sessionId")),
        auth_method_id=_or_unknown(params.get("authMethodId")),
        reason=reason,
        halted_at=utc_now_iso(),
    ).to_output()
