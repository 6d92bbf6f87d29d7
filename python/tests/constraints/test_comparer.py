import pytest
from stringeq.constraints import find_mismatch, normalize, strings_equal


class TestNormalize:
    """Test the normalization policy."""

    def test_no_flags(self):
        assert normalize(" A b ", False, False) == " A b "

    def test_case(self):
        assert normalize("Straße", True, False) == "strasse"

    def test_whitespace(self):
        assert normalize(" a\tb\nc d ", False, True) == "abcd"


class TestStringsEqual:
    """Test the string comparison collaborator."""

    def test_expected_none(self):
        assert strings_equal(None, "", False, False) is False

    def test_exact(self):
        assert strings_equal("abc", "abc", False, False) is True
        assert strings_equal("abc", "abd", False, False) is False

    @pytest.mark.parametrize(
        "expected, actual",
        [("Hello", "hello"), ("HELLO", "hello"), ("straße", "STRASSE")],
    )
    def test_case_insensitive(self, expected, actual):
        assert strings_equal(expected, actual, True, False) is True
        assert strings_equal(expected, actual, False, False) is False

    @pytest.mark.parametrize(
        "expected, actual",
        [("a b", "a  b"), ("a b", "ab"), ("a\nb", "a b"), ("  ab", "ab  ")],
    )
    def test_ignore_whitespace(self, expected, actual):
        assert strings_equal(expected, actual, False, True) is True
        assert strings_equal(expected, actual, False, False) is False

    def test_ignore_whitespace_keeps_case(self):
        assert strings_equal("A b", "a b", False, True) is False


class TestFindMismatch:
    """Test locating the first difference."""

    def test_identical(self):
        assert find_mismatch("abc", "abc") == -1

    def test_first_difference(self):
        assert find_mismatch("abcd", "abXd") == 2

    def test_prefix(self):
        assert find_mismatch("abc", "abcdef") == 3
        assert find_mismatch("abcdef", "abc") == 3

    def test_empty(self):
        assert find_mismatch("", "a") == 0

    def test_case_insensitive(self):
        assert find_mismatch("Hello", "hello") == 0
        assert find_mismatch("Hello", "hello", case_insensitive=True) == -1
        assert find_mismatch("Hello", "help", case_insensitive=True) == 3

    def test_case_insensitive_matches_casefold(self):
        """Test the mismatch search agrees with strings_equal on case folding."""
        assert find_mismatch("ß", "SS", case_insensitive=True) == -1
        assert strings_equal("ß", "SS", True, False) is True
