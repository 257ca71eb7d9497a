"""Per-call context handed to built-in functions."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


class CallContext:
    """Output stream and return-value slot for one built-in call."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out: TextIO = out if out is not None else sys.stdout
        self.return_value: Optional[str] = None

    def write(self, text: str) -> None:
        """Write text to the output stream exactly as given."""
        self.out.write(text)

    def set_return(self, value: Optional[str]) -> None:
        """Record the call's result; a missing value is stored as "0"."""
        self.return_value = "0" if value is None else str(value)