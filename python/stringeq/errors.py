class StringEqError(Exception):
    """Base class for all stringeq errors."""

class InvalidUsageError(StringEqError):
    """Error raised when a constraint is configured in a way it cannot honor."""

class AssertionFailedError(StringEqError, AssertionError):
    """Error raised by assert_that when the actual value does not satisfy the constraint."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result
