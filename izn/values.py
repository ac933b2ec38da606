"""Scalar values and the type inference applied to raw value text."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

INTEGER_CHARS = frozenset("0123456789-")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
HEX_FLOAT_RE = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?")


class ValueKind(Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    @property
    def default(self) -> Union[str, int, float, bool]:
        return _DEFAULTS[self]

    @classmethod
    def from_type(cls, kind: Union["ValueKind", type]) -> "ValueKind":
        if isinstance(kind, ValueKind):
            return kind
        for value_kind, python_type in _PYTHON_TYPES.items():
            if kind is python_type:
                return value_kind
        raise TypeError(f"Unsupported value kind: {kind!r}")


_PYTHON_TYPES = {
    ValueKind.STRING: str,
    ValueKind.INTEGER: int,
    ValueKind.FLOAT: float,
    ValueKind.BOOLEAN: bool,
}

_DEFAULTS = {
    ValueKind.STRING: "",
    ValueKind.INTEGER: 0,
    ValueKind.FLOAT: 0.0,
    ValueKind.BOOLEAN: False,
}


@dataclass(frozen=True)
class ScalarValue:
    kind: ValueKind
    value: Union[str, int, float, bool]

    def __post_init__(self):
        # bool is an int subclass, so compare types exactly
        if type(self.value) is not self.kind.python_type:
            raise TypeError(f"{self.kind.value} value cannot hold {self.value!r}")

    @classmethod
    def string(cls, value: str) -> "ScalarValue":
        return cls(ValueKind.STRING, value)

    @classmethod
    def integer(cls, value: int) -> "ScalarValue":
        return cls(ValueKind.INTEGER, value)

    @classmethod
    def floating(cls, value: float) -> "ScalarValue":
        return cls(ValueKind.FLOAT, value)

    @classmethod
    def boolean(cls, value: bool) -> "ScalarValue":
        return cls(ValueKind.BOOLEAN, value)

    def __str__(self):
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.value else "false"
        return str(self.value)


def is_quoted(text: str) -> bool:
    return len(text) >= 2 and text[0] == '"' and text[-1] == '"'


def is_bool(text: str) -> bool:
    return text.lower() in {"true", "false"}


def is_integer(text: str) -> bool:
    """Character filter only; "-" or "1-2" pass here and still fail int()."""
    return bool(text) and all(c in INTEGER_CHARS for c in text)


def is_hex_float(text: str) -> bool:
    return HEX_FLOAT_RE.fullmatch(text) is not None


def is_float(text: str) -> bool:
    """Decimal or hexadecimal ("0x1.8p1") literal containing a '.'."""
    return "." in text and (FLOAT_RE.fullmatch(text) is not None or is_hex_float(text))


def infer_value(text: str) -> ScalarValue:
    """Infer the scalar kind of an already trimmed value.

    Rungs are tried in order: quoted string, boolean, integer, float, and
    finally the plain string. A quoted value is always a string, whatever
    its interior looks like.
    """
    if is_quoted(text):
        return ScalarValue.string(text[1:-1])

    if is_bool(text):
        return ScalarValue.boolean(text.lower() == "true")

    if is_integer(text):
        try:
            return ScalarValue.integer(int(text))
        except ValueError:
            pass

    if is_float(text):
        return ScalarValue.floating(float.fromhex(text) if is_hex_float(text) else float(text))

    return ScalarValue.string(text)
