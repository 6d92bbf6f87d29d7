import os
from typing import TYPE_CHECKING, Any

from .constraints.comparer import find_mismatch

if TYPE_CHECKING:
    from .constraints.result import ComparisonResult

ELLIPSIS = "..."

PREFIX_EXPECTED = "  Expected: "
PREFIX_ACTUAL = "  But was:  "
PREFIX_LENGTH = len(PREFIX_EXPECTED)

DEFAULT_MAX_LINE_LENGTH = 78

_ESCAPES = {
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\x85": "\\x85",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def max_line_length() -> int:
    """Line width used when clipping strings, from STRINGEQ_MAX_LINE_LENGTH."""
    raw = os.getenv("STRINGEQ_MAX_LINE_LENGTH")
    if not raw:
        return DEFAULT_MAX_LINE_LENGTH
    try:
        length = int(raw)
    except ValueError as e:
        raise ValueError(f"STRINGEQ_MAX_LINE_LENGTH must be an integer, got {raw!r}") from e
    # Room for the prefix, two quotes and both ellipses
    return max(length, PREFIX_LENGTH + 2 + 2 * len(ELLIPSIS) + 1)


def escape_control_chars(s: str) -> str:
    return "".join(_ESCAPES.get(c, c) for c in s)


def format_value(value: Any) -> str:
    """Format a value for display in a message."""
    if value is None:
        return "None"
    if isinstance(value, str):
        return f'"{escape_control_chars(value)}"'
    return repr(value)


def _modifiers(case_insensitive: bool, ignore_whitespace: bool) -> str:
    suffix = ""
    if case_insensitive:
        suffix += ", ignoring case"
    if ignore_whitespace:
        suffix += ", ignoring white-space"
    return suffix


def describe(expected: str | None, case_insensitive: bool, ignore_whitespace: bool) -> str:
    """Describe the expected side of an equal-string constraint."""
    return format_value(expected) + _modifiers(case_insensitive, ignore_whitespace)


def clip_string(s: str, max_length: int, clip_start: int) -> str:
    """Clip a string to max_length characters starting at clip_start.

    Ellipses mark the text removed at either end and count towards max_length.
    """
    clip_length = max_length
    parts = []

    if clip_start > 0:
        clip_length -= len(ELLIPSIS)
        parts.append(ELLIPSIS)

    if len(s) - clip_start > clip_length:
        clip_length -= len(ELLIPSIS)
        parts.append(s[clip_start : clip_start + clip_length])
        parts.append(ELLIPSIS)
    else:
        parts.append(s[clip_start:])

    return "".join(parts)


def clip_expected_and_actual(expected: str, actual: str, max_display_length: int, mismatch: int) -> tuple[str, str, int]:
    """Clip both strings so the first mismatch stays visible.

    Returns:
        The clipped expected and actual strings, and the clip start index.
    """
    max_string_length = max(len(expected), len(actual))
    if max_string_length <= max_display_length:
        return expected, actual, 0

    clip_length = max_display_length - len(ELLIPSIS)
    clip_start = max_string_length - clip_length
    if clip_start > mismatch:
        clip_start = max(0, mismatch - clip_length // 2)

    return (
        clip_string(expected, max_display_length, clip_start),
        clip_string(actual, max_display_length, clip_start),
        clip_start,
    )


def _caret_line(mismatch: int) -> str:
    # The caret sits under the mismatching character, one column past the opening quote
    return "  " + "-" * (PREFIX_LENGTH + mismatch - 1) + "^"


def _string_differences(result: "ComparisonResult") -> list[str]:
    expected = result.expected
    actual = result.actual_value
    mismatch = find_mismatch(expected, actual, result.case_insensitive)

    lines = []
    if len(expected) != len(actual):
        lines.append(f"  Expected string length {len(expected)} but was {len(actual)}. Strings differ at index {mismatch}.")
    else:
        lines.append(f"  String lengths are both {len(expected)}. Strings differ at index {mismatch}.")

    if result.clip_on_display:
        max_display_length = max_line_length() - PREFIX_LENGTH - 2
        expected, actual, clip_start = clip_expected_and_actual(expected, actual, max_display_length, mismatch)
        mismatch -= clip_start
        if clip_start > 0:
            mismatch += len(ELLIPSIS)

    lines.append(PREFIX_EXPECTED + format_value(expected) + _modifiers(result.case_insensitive, result.ignore_whitespace))
    lines.append(PREFIX_ACTUAL + format_value(actual))
    lines.append(_caret_line(mismatch))
    return lines


def write_failure_message(result: "ComparisonResult") -> str:
    """Render the failure message for a comparison result.

    Both-string failures without white-space normalization include the length
    line and a caret under the first mismatch. Everything else gets the plain
    expected/actual pair.
    """
    if (
        isinstance(result.expected, str)
        and isinstance(result.actual_value, str)
        and not result.ignore_whitespace
        and find_mismatch(result.expected, result.actual_value, result.case_insensitive) >= 0
    ):
        lines = _string_differences(result)
    else:
        lines = [
            PREFIX_EXPECTED + result.description,
            PREFIX_ACTUAL + format_value(result.actual_value),
        ]
    return "\n".join(lines) + "\n"
