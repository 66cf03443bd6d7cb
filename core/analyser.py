from typing import Dict, Optional

from core.combiner import combine_class_criteria
from core.criteria import GenerationClass
from core.parser import parse_criteria, sort_criteria
from core.registry import ClassCriteriaRegistry
from exceptions.custom_errors import CriteriaConflictError
from utils.constants import (
    ATTEMPT_TO_COMBINE_MESSAGE,
    NOT_COMBINED_MESSAGE,
    NOT_NEED_TO_BE_COMBINED_MESSAGE,
)
from utils.logger import logger

TOTAL_CLASS = GenerationClass.S.value
RAND_KEY = GenerationClass.RAND.value.lower()


def sum_class_counts(criteria: Dict[str, int]) -> int:
    """Sum of all class counts, excluding the declared total."""
    return sum(value for key, value in criteria.items() if key != TOTAL_CLASS)


def has_free_places(criteria: Dict[str, int]) -> bool:
    """
    Check that the declared total can hold every class count.

    Criteria without a total are accepted as they are.
    """
    total = criteria.get(TOTAL_CLASS)
    if total is None:
        return True
    return total - sum_class_counts(criteria) >= 0


def add_rand_class_criteria(criteria: Dict[str, int]) -> None:
    """Add the unassigned remainder under the "rand" key, when a total is declared."""
    total = criteria.get(TOTAL_CLASS)
    if total is not None:
        criteria[RAND_KEY] = total - sum_class_counts(criteria)


class CriteriaAnalyser:
    """
    Parses criteria lines, checks them against the declared total and, when
    the counts conflict, merges compatible classes to reconcile them.

    Combined class criteria are stored in the registry under the composite
    class name so later lookups (e.g. student filtering) can resolve them.
    """

    def __init__(self, registry: ClassCriteriaRegistry):
        self.registry = registry

    def parse(self, text: Optional[str]) -> Optional[Dict[str, int]]:
        return parse_criteria(text)

    def sort(self, criteria: Optional[Dict[str, int]]) -> Optional[str]:
        return sort_criteria(criteria)

    def analyse(self, text: Optional[str]) -> Optional[Dict[str, int]]:
        """Parse and validate a criteria line in one step."""
        return self.validate(self.parse(text))

    def validate(self, parsed: Optional[Dict[str, int]]) -> Optional[Dict[str, int]]:
        """
        Validate parsed criteria against the declared total.

        Returns a new mapping with the "rand" remainder added. When the class
        counts exceed the total, one combination pass is attempted first.

        Raises:
            CriteriaConflictError: If the counts still exceed the total after combining.
        """
        if parsed is None:
            return None

        if has_free_places(parsed):
            result = dict(parsed)
            add_rand_class_criteria(result)
            logger.debug(NOT_NEED_TO_BE_COMBINED_MESSAGE)
            return result

        logger.debug(ATTEMPT_TO_COMBINE_MESSAGE)
        combined = self.combine_possible_criteria(parsed)

        if not has_free_places(combined):
            raise CriteriaConflictError()

        logger.debug("Result criteria line: %s", sort_criteria(combined))
        add_rand_class_criteria(combined)
        return combined

    def combine_possible_criteria(self, criteria: Dict[str, int]) -> Dict[str, int]:
        """
        Merge each class with the first compatible class found, in input order.

        The smaller count moves to the composite class (e.g. "AB") and the
        excess stays on the class it came from. First fit is intended: the
        search stops at the first compatible pair rather than the best one.
        Composite classes created here are not merged again in the same pass.
        """
        result = dict(criteria)

        for key in criteria:
            if key == TOTAL_CLASS or key not in result:
                continue

            first = self.registry.get(key)
            if first is None:
                logger.warning("No criteria registered for class %r, it cannot be combined.", key)
                continue

            for other_key, other_value in list(result.items()):
                if other_key == TOTAL_CLASS or key in other_key:
                    continue

                second = self.registry.get(other_key)
                if second is None:
                    # the search for this class ends at the first undefined partner
                    logger.warning(
                        "No criteria registered for class %r, %r is left uncombined.",
                        other_key,
                        key,
                    )
                    break

                combined_name = key + other_key
                if self.registry.is_canonical(combined_name):
                    logger.warning(
                        "%s %s + %s: %r is already a configured class.",
                        NOT_COMBINED_MESSAGE,
                        key,
                        other_key,
                        combined_name,
                    )
                    continue

                combined = combine_class_criteria(first, second)
                if not combined.ok:
                    logger.warning(
                        "%s %s + %s: %s", NOT_COMBINED_MESSAGE, key, other_key, combined.error
                    )
                    continue

                self.registry.put_combined(combined_name, combined.criteria)
                self._reconcile_counts(result, key, other_key, combined_name, other_value)
                logger.debug("Combined criteria: %s - %s", combined_name, combined.criteria)
                break

        return result

    @staticmethod
    def _reconcile_counts(
        result: Dict[str, int], key: str, other_key: str, combined_name: str, other_value: int
    ) -> None:
        value = result[key]
        diff = value - other_value

        if diff == 0:
            del result[key]
            del result[other_key]
            result[combined_name] = value
        elif diff > 0:
            result[key] = diff
            del result[other_key]
            result[combined_name] = other_value
        else:
            result[other_key] = other_value - value
            del result[key]
            result[combined_name] = value
