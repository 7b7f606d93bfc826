"""Read-only, field-accessible views over schema-free response data."""

from collections.abc import Iterator, Mapping
from typing import Any

_MISSING = object()


class ResponseObject:
    """Read-only view over a JSON object from a response's DATA field.

    Every key of the wrapped mapping is exposed under its lower-cased name,
    both as an attribute and through ``get()`` / ``obj[name]``. Upper-case
    names are never resolved, so ``obj.FOO`` raises AttributeError even when
    the response carried ``"FOO"``. Keys that are not valid identifiers are
    reachable through ``get()`` or ``obj[name]``. Fields named like a
    method (``get``, ``to_dict``) are shadowed on attribute access and are
    reached the same way.

    Values are wrapped recursively: nested objects become ResponseObjects and
    arrays become lists of wrapped elements.
    """

    __slots__ = ("__fields",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        fields: dict[str, Any] = {}
        for key, value in data.items():
            # Later keys win when two keys collide after lower-casing
            fields[str(key).lower()] = wrap(value)
        object.__setattr__(self, "_ResponseObject__fields", fields)

    def __getattr__(self, name: str) -> Any:
        fields = object.__getattribute__(self, "_ResponseObject__fields")
        try:
            return fields[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no field {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __getitem__(self, name: str) -> Any:
        return self.__fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.__fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.__fields)

    def __len__(self) -> int:
        return len(self.__fields)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self.__fields))

    def __reduce__(self) -> tuple[type["ResponseObject"], tuple[dict[str, Any]]]:
        return (type(self), (self.to_dict(),))

    def __repr__(self) -> str:
        inner = ", ".join(f"{key}={value!r}" for key, value in self.__fields.items())
        return f"{type(self).__name__}({inner})"

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value of field ``name``, or ``default`` if absent."""
        value = self.__fields.get(name, _MISSING)
        return default if value is _MISSING else value

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-dict copy keyed by the lower-cased field names."""
        return {key: _unwrap(value) for key, value in self.__fields.items()}


def wrap(node: Any) -> Any:
    """Map a parsed JSON node onto ResponseObjects.

    Args:
        node: A mapping, sequence or scalar from a parsed JSON document.

    Returns:
        A ResponseObject for a mapping, a list of wrapped elements for a
        list or tuple, and the node itself for any scalar or None.
    """
    if isinstance(node, Mapping):
        return ResponseObject(node)
    if isinstance(node, (list, tuple)):
        return [wrap(item) for item in node]
    return node


def _unwrap(value: Any) -> Any:
    if isinstance(value, ResponseObject):
        return value.to_dict()
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    return value
