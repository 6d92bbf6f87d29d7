# ruff: noqa: F401
from .assertions import assert_that
from .constraints import (
    ComparisonResult,
    ConstraintStatus,
    ConvertibleToString,
    EqualStringConstraint,
    EquatableToString,
    as_string,
    equal_to,
)
from .errors import AssertionFailedError, InvalidUsageError, StringEqError

__version__ = "0.1.0"
