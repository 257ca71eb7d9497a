"""String-valued runtime helpers: return slot, truthiness, lengths and object references."""

from __future__ import annotations

from typing import Optional

OBJECT_REF_PREFIX = "obj:"
UNDEFINED = "undefined"

_TYPE_DEFAULTS = {
    "int": "0",
    "long": "0",
    "float": "0.0",
    "double": "0.0",
    "bool": "false",
    "string": "",
}

_FALSY = frozenset({"0", "false", ""})


class ReturnSlot:
    """Holds the most recent return value; reads as "0" until something is set."""

    def __init__(self) -> None:
        self._value: str = "0"

    def set(self, value: Optional[str]) -> None:
        """Store a return value; a missing value is stored as "0"."""
        self._value = "0" if value is None else str(value)

    def get(self) -> str:
        """Return the stored value."""
        return self._value

    def __repr__(self) -> str:
        return f"ReturnSlot({self._value!r})"


def is_truthy(value: Optional[str]) -> bool:
    """A value is true unless it is missing, "0", "false" or empty."""
    return value is not None and value not in _FALSY


def _count_array_elements(literal: str) -> int:
    depth = 0
    count = 0
    in_element = False
    for ch in literal[1:]:
        if depth == 0 and ch == "]":
            break
        if ch == "[":
            depth += 1
            in_element = True
        elif ch == "]":
            if depth > 0:
                depth -= 1
            in_element = True
        elif ch == "," and depth == 0:
            count += 1
            in_element = False
        elif not ch.isspace():
            in_element = True
    if in_element:
        count += 1
    return count


def value_length(value: str) -> int:
    """Length of a value as the ``.length`` member reports it.

    Array literals ("[...]") count their top-level elements; commas inside
    nested arrays are ignored. Any other string counts its UTF-8 bytes.
    """
    if value.startswith("["):
        return _count_array_elements(value)
    return len(value.encode("utf-8"))


def _leading_int(text: str) -> int:
    """Parse a leading decimal integer the lenient way: no digits gives 0."""
    stripped = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def parse_object_ref(value: Optional[str]) -> Optional[int]:
    """Return the id in an "obj:<id>" reference, or None for other values."""
    if value is None or not value.startswith(OBJECT_REF_PREFIX):
        return None
    return _leading_int(value[len(OBJECT_REF_PREFIX):])


def default_for_type(data_type: Optional[str]) -> str:
    """Initial value of a declared variable that has no initialiser."""
    if data_type is None:
        return UNDEFINED
    return _TYPE_DEFAULTS.get(data_type, UNDEFINED)