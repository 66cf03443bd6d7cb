from typing import Optional, Tuple

from core.criteria import RangeCriteria
from exceptions.custom_errors import IncompatibleCriteriaError
from utils.constants import NOT_COMBINED_MESSAGE


def intersect_ranges(
    first_min: float, first_max: float, second_min: float, second_max: float
) -> Optional[Tuple[float, float]]:
    """
    Intersect two inclusive ranges.

    Returns:
        Optional[Tuple[float, float]]: `(min, max)` of the overlap, or None if the ranges are disjoint.
    """
    if first_min <= second_max and first_max >= second_min:
        return max(first_min, second_min), min(first_max, second_max)
    return None


def combine_range_criteria(
    first: Optional[RangeCriteria], second: Optional[RangeCriteria]
) -> Optional[RangeCriteria]:
    """
    Combine two optional range criteria.

    A missing side leaves the other one unchanged; two present ranges are intersected.

    Raises:
        IncompatibleCriteriaError: If both ranges are present and disjoint.
    """
    if first is None:
        return second
    if second is None:
        return first

    combined = intersect_ranges(first.min, first.max, second.min, second.max)
    if combined is None:
        raise IncompatibleCriteriaError(
            f"{NOT_COMBINED_MESSAGE} [{first.min}, {first.max}] and [{second.min}, {second.max}] do not overlap."
        )
    return RangeCriteria(min=combined[0], max=combined[1])
