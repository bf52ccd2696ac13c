"""Uniform result record returned by every command operation."""

from dataclasses import dataclass
from typing import Any


@dataclass
class CommandResult:
    """
    Outcome of a command operation.

    Attributes
    ----------
    success : bool
        Whether the operation succeeded.
    message : str
        Human-readable message for the console.
    exit_code : int
        Process exit code, 0 when successful.
    payload : Any, optional
        Operation-specific data.
    error : Any, optional
        Original exception or remote error object, kept for diagnostics.
    """

    success: bool
    message: str
    exit_code: int = 0
    payload: Any = None
    error: Any = None

    @classmethod
    def ok(cls, message: str, payload: Any = None) -> "CommandResult":
        return cls(success=True, message=message, exit_code=0, payload=payload)

    @classmethod
    def fail(
        cls,
        message: str,
        payload: Any = None,
        error: Any = None,
        exit_code: int = 1,
    ) -> "CommandResult":
        return cls(success=False, message=message, exit_code=exit_code, payload=payload, error=error)

    def as_dict(self) -> dict[str, Any]:
        """Return a stable machine-readable structure."""
        error = self.error
        if isinstance(error, BaseException):
            error = str(error)
        return {
            "success": self.success,
            "message": self.message,
            "exit_code": self.exit_code,
            "payload": self.payload,
            "error": error,
        }
