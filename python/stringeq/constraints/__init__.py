from .capabilities import (
    NOT_CONVERTIBLE,
    Absent,
    ActualValue,
    ConvertedString,
    ConvertibleToString,
    EquatableToString,
    NativeString,
    Opaque,
    StringEquatable,
    as_string,
    classify,
)
from .comparer import find_mismatch, normalize, strings_equal
from .equal_string import EqualStringConstraint, equal_to
from .result import ComparisonResult, ConstraintStatus
