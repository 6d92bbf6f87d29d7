from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from .. import messages


class ConstraintStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class ComparisonResult(BaseModel):
    """Outcome of a single equal-string evaluation.

    The modifiers are echoed from the constraint at evaluation time so the
    reporting layer never has to look back at the constraint.

    Attributes:
        description: Description of the expected side (e.g. '"x", ignoring case').
        expected: The expected string, or None.
        actual_value: The value that was compared. For converted values this is the converted string.
        succeeded: Whether the actual value satisfied the constraint.
        case_insensitive: Whether case was ignored.
        ignore_whitespace: Whether white-space was ignored.
        clip_on_display: Whether long strings are clipped in failure messages.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    description: str
    expected: str | None
    actual_value: Any
    succeeded: bool
    case_insensitive: bool = False
    ignore_whitespace: bool = False
    clip_on_display: bool = True

    @property
    def status(self) -> ConstraintStatus:
        return ConstraintStatus.SUCCESS if self.succeeded else ConstraintStatus.FAILURE

    def failure_message(self) -> str:
        """Render the failure message. Also usable on successful results."""
        return messages.write_failure_message(self)
