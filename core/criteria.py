from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from utils.constants import RAND_CLASS, TOTAL_CLASS


class GenerationClass(str, Enum):
    """Reserved class-name tokens. Every other token is a free-form class name."""

    S = TOTAL_CLASS
    """Total student count."""
    RAND = RAND_CLASS
    """Unassigned remainder."""


class RangeCriteria(BaseModel):
    """Inclusive numeric bound, e.g. an age or course range."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="after")
    def check_bounds(self) -> "RangeCriteria":
        if self.min > self.max:
            raise ValueError(f"Range minimum {self.min} is greater than maximum {self.max}")
        return self


class MarksCriteria(BaseModel):
    """
    Mark thresholds of a class.

    `marks_criteria` bounds the mark of a single subject (e.g. "MATH"),
    `group_operations_criteria` bounds an aggregate over the marks (e.g. "AVERAGE").
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    marks_criteria: Dict[str, RangeCriteria] = Field(
        default_factory=dict, alias="marksCriteria"
    )
    group_operations_criteria: Dict[str, RangeCriteria] = Field(
        default_factory=dict, alias="groupOperationsCriteria"
    )


class ClassCriteria(BaseModel):
    """
    Definition of a generation class. A missing field leaves that attribute
    unconstrained.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    age_criteria: Optional[RangeCriteria] = Field(default=None, alias="ageCriteria")
    course_criteria: Optional[RangeCriteria] = Field(default=None, alias="courseCriteria")
    marks_criteria: Optional[MarksCriteria] = Field(
        default=None, alias="studentMarksWrapperCriteria"
    )
