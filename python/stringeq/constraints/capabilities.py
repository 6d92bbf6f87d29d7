import inspect
from functools import singledispatch
from typing import Annotated, Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Discriminator


@runtime_checkable
class ConvertibleToString(Protocol):
    """A type that knows how to present itself as a string.

    Implementing `to_string` opts a type into textual comparison, so case and
    white-space modifiers apply to the converted value.
    """

    def to_string(self) -> str | None: ...


@runtime_checkable
class EquatableToString(Protocol):
    """A type that can compare itself against a string without converting."""

    def equals_string(self, other: str | None) -> bool: ...


class _NotConvertible:
    def __repr__(self) -> str:
        return "NOT_CONVERTIBLE"


NOT_CONVERTIBLE = _NotConvertible()


def _accepts(method: Any, *args: Any) -> bool:
    """Whether method is callable with exactly these positional arguments."""
    if not callable(method):
        return False
    try:
        inspect.signature(method).bind(*args)
    except (TypeError, ValueError):
        return False
    return True


@singledispatch
def as_string(value: Any) -> Any:
    """Convert a value to a string, or return NOT_CONVERTIBLE.

    Types that cannot implement ConvertibleToString themselves can opt in with
    `as_string.register(SomeType)`.
    """
    if isinstance(value, ConvertibleToString) and _accepts(value.to_string):
        return value.to_string()
    return NOT_CONVERTIBLE


class _Shape(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)


class Absent(_Shape):
    kind: Literal["absent"] = "absent"


class NativeString(_Shape):
    kind: Literal["native_string"] = "native_string"
    value: str


class ConvertedString(_Shape):
    kind: Literal["converted_string"] = "converted_string"
    value: str


class StringEquatable(_Shape):
    kind: Literal["string_equatable"] = "string_equatable"
    value: Any


class Opaque(_Shape):
    kind: Literal["opaque"] = "opaque"
    value: Any


ActualValue = Annotated[
    Absent | NativeString | ConvertedString | StringEquatable | Opaque,
    Discriminator("kind"),
]


def classify(actual: Any) -> ActualValue:
    """Classify an actual value into the shape used to compare it against a string.

    Checks run in priority order and the first match wins:
        None -> Absent
        str (and subclasses) -> NativeString
        registered or ConvertibleToString conversion -> ConvertedString
        EquatableToString -> StringEquatable
        anything else -> Opaque

    A conversion that yields None (or anything but a string) falls through to the
    later checks. So does a to_string or equals_string attribute that cannot be
    called with the expected arguments.
    """
    if actual is None:
        return Absent()

    if isinstance(actual, str):
        return NativeString(value=actual)

    converted = as_string(actual)
    if isinstance(converted, str):
        return ConvertedString(value=converted)

    if isinstance(actual, EquatableToString) and _accepts(actual.equals_string, ""):
        return StringEquatable(value=actual)

    return Opaque(value=actual)
