"""Output records returned to the job framework.

Field names are snake_case in Python and camelCase on the wire:

    CancelResult(...).to_output()
    -> {"sessionId": ..., "authMethodId": ..., "sessionCancelled": True, "cancelledAt": ...}
"""

from __future__ import annotations

__all__ = [
    "CancelResult",
    "HaltResult",
]

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _OutputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_output(self) -> dict[str, Any]:
        """Serialize with camelCase keys for the framework."""
        return self.model_dump(by_alias=True)


class CancelResult(_OutputModel):
    """Successful cancellation of one session."""

    session_id: str
    auth_method_id: str
    session_cancelled: Literal[True] = True
    cancelled_at: str


class HaltResult(_OutputModel):
    """Acknowledgment returned when the framework halts the job."""

    session_id: str
    auth_method_id: str
    reason: str
    halted_at: str
    cleanup_completed: Literal[True] = True
