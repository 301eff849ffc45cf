"""Tests for output records and the error type."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from boundary_cancel.exceptions import ActionError, ErrorKind, fatal_error, retryable_error
from boundary_cancel.models import CancelResult, HaltResult


class TestActionError:
    """Tests for ActionError classification."""

    def test_defaults_to_fatal(self) -> None:
        error = ActionError("boom")
        assert error.kind is ErrorKind.FATAL
        assert error.retryable is False

    def test_helpers(self) -> None:
        assert fatal_error("a").kind is ErrorKind.FATAL
        assert retryable_error("b").retryable is True

    def test_str_is_message(self) -> None:
        assert str(retryable_error("Boundary API rate limit exceeded")) == "Boundary API rate limit exceeded"


class TestOutputModels:
    """Tests for CancelResult and HaltResult."""

    def test_cancel_result_camel_case(self) -> None:
        """Serializes with camelCase keys and sessionCancelled true."""
        result = CancelResult(session_id="s_1", auth_method_id="ampw_1", cancelled_at="2026-10-18T00:00:00.000Z")
        assert result.to_output() == {
            "sessionId": "s_1",
            "authMethodId": "ampw_1",
            "sessionCancelled": True,
            "cancelledAt": "2026-10-18T00:00:00.000Z",
        }

    def test_halt_result_camel_case(self) -> None:
        result = HaltResult(session_id="s", auth_method_id="a", reason="r", halted_at="t")
        assert result.to_output()["cleanupCompleted"] is True
        assert result.to_output()["haltedAt"] == "t"

    def test_cancelled_cannot_be_false(self) -> None:
        """A cancel result only ever reports success."""
        with pytest.raises(ValidationError):
            CancelResult(session_id="s", auth_method_id="a", cancelled_at="t", session_cancelled=False)
