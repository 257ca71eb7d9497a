"""Call-stack frames holding string-valued variables."""

from __future__ import annotations

from typing import Optional

MAX_VARIABLES = 64
MAX_NAME_LENGTH = 127
MAX_VALUE_LENGTH = 1023


class VariableLimitError(RuntimeError):
    """Raised when a frame cannot hold another variable."""


class StackFrame:
    """A frame of local variables linked to the frame that called it."""

    def __init__(self, name: str, parent: Optional["StackFrame"] = None) -> None:
        self.name = name[:MAX_NAME_LENGTH]
        self.function_name = name[:MAX_NAME_LENGTH]
        self.parent = parent
        self._variables: dict[str, str] = {}

    def set_variable(self, name: Optional[str], value: Optional[str]) -> None:
        """Set a variable in this frame only, creating it if needed.

        A missing name or value is ignored.
        """
        if name is None or value is None:
            return
        key = name[:MAX_NAME_LENGTH]
        stored = value[:MAX_VALUE_LENGTH]
        if key in self._variables:
            self._variables[key] = stored
            return
        if len(self._variables) >= MAX_VARIABLES:
            raise VariableLimitError(
                f"Stack frame '{self.name}' variable limit ({MAX_VARIABLES}) "
                f"reached when setting '{name}'."
            )
        self._variables[key] = stored

    def get_variable(self, name: Optional[str]) -> Optional[str]:
        """Look a variable up in this frame, then in each parent in turn."""
        if name is None:
            return None
        key = name[:MAX_NAME_LENGTH]
        frame: Optional[StackFrame] = self
        while frame is not None:
            if key in frame._variables:
                return frame._variables[key]
            frame = frame.parent
        return None

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"StackFrame({self.name!r}, variables={len(self)})"