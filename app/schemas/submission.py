"""Form state returned to the caller when a submission must be re-rendered."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class SubmissionResult(BaseModel):
    """Field-scoped errors and/or a form-level message.

    A submission that succeeded and navigated away produces no result at all;
    an instance always means the form is shown again with this state.
    """

    errors: dict[str, list[str]] | None = None
    message: str | None = None

    def to_state(self) -> dict[str, Any]:
        """Return the JSON form state with unset parts omitted."""
        return self.model_dump(exclude_none=True)


class LoginState(BaseModel):
    """Login form state; ``message`` is set only for rejected credentials."""

    message: str | None = None
