from typing import Any

from .constraints.equal_string import EqualStringConstraint
from .constraints.result import ComparisonResult
from .errors import AssertionFailedError
from .logs import get_logger

logger = get_logger("stringeq.assertions")


def assert_that(actual: Any, constraint: EqualStringConstraint, message: str | None = None) -> ComparisonResult:
    """Evaluate a constraint once and raise if the actual value does not satisfy it.

    Args:
        actual: The value under test.
        constraint: The constraint to apply.
        message: Optional text prepended to the failure message.

    Returns:
        The successful comparison result.

    Raises:
        AssertionFailedError: If the comparison fails. The result is attached as `.result`.
        InvalidUsageError: If the constraint cannot be applied to the actual value.
    """
    result = constraint.evaluate(actual)
    if result.succeeded:
        return result

    failure = result.failure_message()
    if message:
        failure = f"  {message}\n{failure}"
    logger.info("assertion_failed", description=result.description, actual_type=type(actual).__name__)
    raise AssertionFailedError(failure, result=result)
