import re
from typing import Dict, Optional

from core.criteria import GenerationClass
from utils.constants import CRITERIA_SPLITTER

TOTAL_CLASS = GenerationClass.S.value

# "<digits><letter>", e.g. "10S" or "3A"
TOKEN_PATTERN = re.compile(r"([0-9]+)([a-zA-Z])")

# First run of adjacent tokens, optionally continued after a single splitter,
# e.g. "10S - 3A2B1C" or "10S3A2B1C".
_RUN = r"(?:[0-9]+[a-zA-Z])+"
CRITERIA_PATTERN = re.compile(
    rf"[ \t]*{_RUN}(?:[ \t]*{re.escape(CRITERIA_SPLITTER)}[ \t]*{_RUN})?[ \t]*"
)


def parse_criteria(text: Optional[str]) -> Optional[Dict[str, int]]:
    """
    Parse a criteria line such as "10S - 3A2B1C" into `{"S": 10, "A": 3, "B": 2, "C": 1}`.

    Only the first criteria run in the text is used and anything else is ignored.
    A class repeated within the run keeps its last count.

    Returns:
        Optional[Dict[str, int]]: None if `text` is None, an empty dict if no run is found.
    """
    if text is None:
        return None

    result: Dict[str, int] = {}
    match = CRITERIA_PATTERN.search(text)
    if match:
        for value, class_name in TOKEN_PATTERN.findall(match.group()):
            result[class_name] = int(value)

    return result


def sort_criteria(criteria: Optional[Dict[str, int]]) -> Optional[str]:
    """
    Serialize criteria back into a criteria line.

    The total comes first, followed by the classes ordered by count (descending)
    and then by name, e.g. `{"S": 10, "B": 2, "A": 3}` -> "10S3A2B".
    """
    if not criteria:
        return None

    classes = sorted(
        ((key, value) for key, value in criteria.items() if key != TOTAL_CLASS),
        key=lambda item: (-item[1], item[0]),
    )

    parts = []
    if TOTAL_CLASS in criteria:
        parts.append(f"{criteria[TOTAL_CLASS]}{TOTAL_CLASS}")
    parts.extend(f"{value}{key}" for key, value in classes)
    return "".join(parts)
