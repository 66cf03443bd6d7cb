from dataclasses import dataclass
from typing import Dict, Optional, TypeVar

from core.criteria import ClassCriteria, MarksCriteria, RangeCriteria
from core.ranges import combine_range_criteria
from exceptions.custom_errors import IncompatibleCriteriaError

K = TypeVar("K")


@dataclass(frozen=True)
class CombineResult:
    """
    Outcome of merging two class criteria.

    Exactly one of `criteria` and `error` is set. A failed result is routine
    during the combination search and only means the pair cannot be merged.
    """

    criteria: Optional[ClassCriteria] = None
    """The merged criteria when the merge succeeded."""
    error: Optional[str] = None
    """Why the pair could not be merged."""

    @property
    def ok(self) -> bool:
        return self.error is None


def combine_criteria_maps(
    first: Dict[K, RangeCriteria], second: Dict[K, RangeCriteria]
) -> Dict[K, RangeCriteria]:
    """
    Union two keyed range maps, intersecting the ranges of shared keys.

    The larger map is used as the base and the smaller one is merged into a
    copy of it, so neither input is modified.

    Raises:
        IncompatibleCriteriaError: If a shared key has disjoint ranges.
    """
    if not first:
        return dict(second)
    if not second:
        return dict(first)

    if len(first) <= len(second):
        result, search = dict(second), first
    else:
        result, search = dict(first), second

    for key, criteria in search.items():
        if key in result:
            result[key] = combine_range_criteria(result[key], criteria)
        else:
            result[key] = criteria

    return result


def combine_marks_criteria(
    first: Optional[MarksCriteria], second: Optional[MarksCriteria]
) -> Optional[MarksCriteria]:
    """Combine subject and group-operation thresholds of two classes."""
    if first is None:
        return second
    if second is None:
        return first

    return MarksCriteria(
        marks_criteria=combine_criteria_maps(first.marks_criteria, second.marks_criteria),
        group_operations_criteria=combine_criteria_maps(
            first.group_operations_criteria, second.group_operations_criteria
        ),
    )


def combine_class_criteria(
    first: Optional[ClassCriteria], second: Optional[ClassCriteria]
) -> CombineResult:
    """
    Merge two class criteria into a new one by intersecting every corresponding field.

    Args:
        first (Optional[ClassCriteria]): Criteria of the first class, None if the class is unknown.
        second (Optional[ClassCriteria]): Criteria of the second class, None if the class is unknown.

    Returns:
        CombineResult: The merged criteria, or the reason the merge is impossible.
    """
    if first is None or second is None:
        return CombineResult(error="Class criteria are not defined.")

    try:
        combined = ClassCriteria(
            age_criteria=combine_range_criteria(first.age_criteria, second.age_criteria),
            course_criteria=combine_range_criteria(
                first.course_criteria, second.course_criteria
            ),
            marks_criteria=combine_marks_criteria(
                first.marks_criteria, second.marks_criteria
            ),
        )
    except IncompatibleCriteriaError as e:
        return CombineResult(error=str(e))

    return CombineResult(criteria=combined)
