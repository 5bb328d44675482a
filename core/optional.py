# =============================================================================
# core/optional.py - Tri-state fields ("unset" vs "set to a value")
# =============================================================================
#
# The Exa API treats an omitted field differently from one explicitly set to
# zero, empty or false.  Python's None cannot carry that distinction on its
# own once a value may legitimately be None, so every optional wire field is
# one of:
#
#     UNSET            the field is left out of the payload / was not returned
#     Present(value)   the field is on the wire with this value
#
# Request builders use set_if() to decide presence; response flatteners use
# value_or() to fall back to the output type's zero value.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union

T = TypeVar("T")


class _Unset:
    """Marker for a field that is absent from the wire."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Unset, ())


UNSET = _Unset()


@dataclass(frozen=True)
class Present(Generic[T]):
    """A field explicitly set to ``value`` (which may itself be falsy)."""

    value: T


Opt = Union[_Unset, Present[T]]


def is_set(opt: Any) -> bool:
    return isinstance(opt, Present)


def set_if(condition: bool, value: T) -> "Opt[T]":
    """Return ``Present(value)`` when ``condition`` holds, else ``UNSET``."""
    return Present(value) if condition else UNSET


def value_or(opt: "Opt[T]", default: T) -> T:
    """Unwrap a tri-state field, using ``default`` when it is unset."""
    if isinstance(opt, Present):
        return opt.value
    return default


def from_key(
    data: Mapping[str, Any],
    key: str,
    convert: Optional[Callable[[Any], T]] = None,
) -> "Opt[T]":
    """Read ``data[key]`` as a tri-state field.

    A missing key or a JSON null is UNSET.  ``convert`` validates/coerces the
    raw value and may raise TypeError or ValueError for a mis-shaped body.
    """
    if key not in data or data[key] is None:
        return UNSET
    value = data[key]
    return Present(convert(value) if convert is not None else value)
