"""A bounded table of named string symbols."""

from __future__ import annotations

from typing import Optional

MAX_SYMBOLS = 100
MAX_SYMBOL_NAME_LENGTH = 63
MAX_SYMBOL_VALUE_LENGTH = 127


class SymbolTableFullError(RuntimeError):
    """Raised when a new symbol does not fit in the table."""


class SymbolTable:
    """Flat mapping of symbol names to string values."""

    def __init__(self) -> None:
        self._symbols: dict[str, str] = {}

    def define(self, name: str, value: str) -> None:
        """Define a symbol, or update it if it already exists."""
        if name is None or value is None:
            raise TypeError("symbol name and value must not be None")
        key = name[:MAX_SYMBOL_NAME_LENGTH]
        stored = value[:MAX_SYMBOL_VALUE_LENGTH]
        if key not in self._symbols and len(self._symbols) >= MAX_SYMBOLS:
            raise SymbolTableFullError("Symbol table limit reached")
        self._symbols[key] = stored

    def lookup(self, name: Optional[str]) -> Optional[str]:
        """Return a symbol's value, or None when it is not defined."""
        if name is None:
            return None
        return self._symbols.get(name[:MAX_SYMBOL_NAME_LENGTH])

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name[:MAX_SYMBOL_NAME_LENGTH] in self._symbols