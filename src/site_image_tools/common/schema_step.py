from enum import Enum
from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, JsonValue

StepOutputRecord = dict[str, JsonValue]


class BaseStepParams(BaseModel):
    """Base parameters for all build steps.

    Range checks are left to the transformation functions so that every
    caller, with or without a schema, gets the same error kinds.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", strict=True)


class StepOutput(BaseModel):
    """Metadata describing what a step produced."""

    width: int
    height: int
    format: str
    size: int


P = TypeVar("P", bound=BaseStepParams)


class StepStatus(str, Enum):
    completed = "completed"
    error = "error"


class StepResult(BaseModel):
    """Outcome of running one step on one item."""

    step_type: str
    identifier: str
    status: StepStatus

    output: StepOutputRecord | None = None
    error_kind: str | None = None
    error_message: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    @property
    def ok(self) -> bool:
        return self.status is StepStatus.completed
