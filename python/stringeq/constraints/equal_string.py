from typing import Any

from pydantic import BaseModel

from .. import messages
from ..errors import InvalidUsageError
from ..logs import get_logger
from .capabilities import Absent, ConvertedString, NativeString, Opaque, StringEquatable, classify
from .comparer import strings_equal
from .result import ComparisonResult

logger = get_logger("stringeq.constraints.equal_string")

_UNSET = object()


class EqualStringConstraint(BaseModel):
    """Checks that an actual value equals an expected string.

    Strings and values convertible to strings are compared textually, so the
    case and white-space modifiers apply. Values that can only test equality
    against a string are compared through that test, and reject both modifiers.
    Anything else never satisfies the constraint.

    Modifiers return the constraint itself, so they can be chained:

        EqualStringConstraint("Hello World").ignore_case().ignore_whitespace()

    Attributes:
        expected: The expected string. None means the actual value must be None.
        case_insensitive: Ignore case when comparing.
        ignoring_whitespace: Ignore white-space characters when comparing.
        clip_strings: Clip long strings in failure messages. Display only.
    """

    expected: str | None = None
    case_insensitive: bool = False
    ignoring_whitespace: bool = False
    clip_strings: bool = True

    def __init__(self, expected: Any = _UNSET, /, **data: Any) -> None:
        if expected is not _UNSET:
            if "expected" in data:
                raise TypeError("expected given both positionally and by keyword")
            data["expected"] = expected
        super().__init__(**data)

    def ignore_case(self) -> "EqualStringConstraint":
        self.case_insensitive = True
        return self

    def ignore_whitespace(self) -> "EqualStringConstraint":
        self.ignoring_whitespace = True
        return self

    def no_clip(self) -> "EqualStringConstraint":
        self.clip_strings = False
        return self

    @property
    def description(self) -> str:
        return messages.describe(self.expected, self.case_insensitive, self.ignoring_whitespace)

    def evaluate(self, actual: Any) -> ComparisonResult:
        """Test whether an actual value satisfies the constraint.

        Args:
            actual: The value under test, of any type.

        Returns:
            The comparison result. A failed comparison is a result, not an error.

        Raises:
            InvalidUsageError: If the actual value can only be compared through
                EquatableToString while ignore_case or ignore_whitespace is set.
        """
        shape = classify(actual)
        logger.debug("string_constraint_dispatch", shape=shape.kind, expected=self.expected)

        match shape:
            case Absent():
                succeeded = self.expected is None
            case NativeString(value=value) | ConvertedString(value=value):
                actual = value
                succeeded = strings_equal(self.expected, value, self.case_insensitive, self.ignoring_whitespace)
            case StringEquatable(value=value):
                if self.case_insensitive or self.ignoring_whitespace:
                    logger.debug(
                        "string_equatable_with_modifiers",
                        actual_type=type(value).__name__,
                        case_insensitive=self.case_insensitive,
                        ignore_whitespace=self.ignoring_whitespace,
                    )
                    raise InvalidUsageError(
                        f"cannot use ignore_case or ignore_whitespace with {type(value).__name__}, "
                        "which only supports equals_string()"
                    )
                succeeded = bool(value.equals_string(self.expected))
            case Opaque():
                succeeded = False

        return ComparisonResult(
            description=self.description,
            expected=self.expected,
            actual_value=actual,
            succeeded=succeeded,
            case_insensitive=self.case_insensitive,
            ignore_whitespace=self.ignoring_whitespace,
            clip_on_display=self.clip_strings,
        )


def equal_to(expected: str | None) -> EqualStringConstraint:
    """Create a constraint expecting the given string."""
    return EqualStringConstraint(expected)
