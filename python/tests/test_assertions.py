import pytest
from stringeq import AssertionFailedError, InvalidUsageError, StringEqError, assert_that, equal_to

from .constraints.conftest import Symbol, Token


class TestAssertThat:
    """Test the assert_that entry point."""

    def test_success_returns_result(self):
        result = assert_that("hello", equal_to("Hello").ignore_case())

        assert result.succeeded is True

    def test_failure_raises(self):
        with pytest.raises(AssertionFailedError) as exc_info:
            assert_that("world", equal_to("hello"))

        error = exc_info.value
        assert isinstance(error, AssertionError)
        assert isinstance(error, StringEqError)
        assert error.result.succeeded is False
        assert '  Expected: "hello"' in str(error)
        assert '  But was:  "world"' in str(error)

    def test_failure_with_message(self):
        with pytest.raises(AssertionFailedError) as exc_info:
            assert_that(Token("b"), equal_to("a"), "token mismatch")

        assert str(exc_info.value).startswith("  token mismatch\n")

    def test_invalid_usage_propagates(self):
        with pytest.raises(InvalidUsageError):
            assert_that(Symbol("x"), equal_to("x").ignore_whitespace())

    def test_none_expected(self):
        assert assert_that(None, equal_to(None)).succeeded is True

        with pytest.raises(AssertionFailedError):
            assert_that("x", equal_to(None))

    def test_failure_prints_nothing(self, capsys):
        with pytest.raises(AssertionFailedError):
            assert_that("world", equal_to("hello"))

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
