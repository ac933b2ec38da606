"""Parsed izn documents and their typed accessors."""

from types import MappingProxyType
from typing import Any, Mapping, Union

from izn.errors import TypeMismatchError
from izn.logger import logger
from izn.values import ScalarValue, ValueKind

Kind = Union[ValueKind, type]


class Document:
    """Sections of typed values produced by a single parse.

    Lookups never fail for missing data: an absent section or key, or a value
    of another kind than the one requested, yields the kind's default
    ("", 0, 0.0 or False). Mismatches are logged as warnings so that they
    stay visible without aborting the caller.
    """

    def __init__(self, sections: Mapping[str, Mapping[str, ScalarValue]] | None = None):
        self._data: dict[str, dict[str, ScalarValue]] = {}
        for name, values in (sections or {}).items():
            self._data[name] = dict(values)

    def __contains__(self, section: object) -> bool:
        return section in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._data == other._data

    def __repr__(self):
        return f"Document({self.to_dict()!r})"

    def sections(self) -> tuple[str, ...]:
        return tuple(self._data)

    def section(self, name: str) -> Mapping[str, ScalarValue]:
        return MappingProxyType(self._data.get(name, {}))

    def has_section(self, name: str) -> bool:
        return name in self._data

    def has_key(self, section: str, key: str) -> bool:
        return key in self._data.get(section, {})

    def get_value(self, section: str, key: str) -> ScalarValue:
        try:
            return self._data[section][key]
        except KeyError:
            return ScalarValue.string("")

    def get(self, section: str, key: str, kind: Kind = str) -> Any:
        """Return the value at section/key if it holds ``kind``, else the kind's default."""
        value_kind = ValueKind.from_type(kind)
        stored = self._data.get(section, {}).get(key)
        if stored is None:
            return value_kind.default

        try:
            return self._unwrap(section, key, stored, value_kind)
        except TypeMismatchError as e:
            logger.warning(str(e))
            return value_kind.default

    def get_str(self, section: str, key: str) -> str:
        return self.get(section, key, ValueKind.STRING)

    def get_int(self, section: str, key: str) -> int:
        return self.get(section, key, ValueKind.INTEGER)

    def get_float(self, section: str, key: str) -> float:
        return self.get(section, key, ValueKind.FLOAT)

    def get_bool(self, section: str, key: str) -> bool:
        return self.get(section, key, ValueKind.BOOLEAN)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {name: {k: v.value for k, v in values.items()} for name, values in self._data.items()}

    def dump(self) -> str:
        blocks = []
        for name, values in self._data.items():
            lines = [f"@{name}:"]
            lines.extend(f"    {key}: {value}" for key, value in values.items())
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks) + "\n" if blocks else ""

    @staticmethod
    def _unwrap(section: str, key: str, stored: ScalarValue, kind: ValueKind) -> Any:
        if stored.kind is not kind:
            raise TypeMismatchError(section, key, kind, stored.kind)
        return stored.value
