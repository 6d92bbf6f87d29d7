def normalize(value: str, case_insensitive: bool, ignore_whitespace: bool) -> str:
    """Apply the case and white-space policy to a string value.

    Args:
        value: The string to normalize.
        case_insensitive: Fold case before comparing.
        ignore_whitespace: Drop every white-space character.

    Returns:
        The normalized string.
    """
    if ignore_whitespace:
        value = "".join(c for c in value if not c.isspace())
    if case_insensitive:
        value = value.casefold()
    return value


def strings_equal(expected: str | None, actual: str, case_insensitive: bool, ignore_whitespace: bool) -> bool:
    """Compare two strings under the given normalization policy.

    A missing expected value never equals a string.
    """
    if expected is None:
        return False
    if not case_insensitive and not ignore_whitespace:
        return expected == actual
    return normalize(expected, case_insensitive, ignore_whitespace) == normalize(
        actual, case_insensitive, ignore_whitespace
    )


def find_mismatch(expected: str, actual: str, case_insensitive: bool = False) -> int:
    """Return the index of the first differing character.

    Returns the shorter length when one string is a prefix of the other, and -1
    when both strings are the same under the case policy.
    """
    if case_insensitive:
        expected = expected.casefold()
        actual = actual.casefold()

    for i, (e, a) in enumerate(zip(expected, actual)):
        if e != a:
            return i

    if len(expected) == len(actual):
        return -1
    return min(len(expected), len(actual))
