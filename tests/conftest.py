import pytest
import sys
from pathlib import Path

# Add project root to sys.path so the top-level packages import without install
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from core.analyser import CriteriaAnalyser
from core.registry import ClassCriteriaRegistry


# Common test fixtures
@pytest.fixture
def raw_class_criteria():
    """Class definitions with known overlaps.

    A/B overlap on age and course, A/C and B/C are disjoint on age,
    B/D are disjoint on MATH marks and E is unconstrained.
    """
    return {
        "A": {
            "ageCriteria": {"min": 10, "max": 20},
            "courseCriteria": {"min": 1, "max": 3},
        },
        "B": {
            "ageCriteria": {"min": 15, "max": 25},
            "courseCriteria": {"min": 2, "max": 5},
            "studentMarksWrapperCriteria": {"marksCriteria": {"MATH": {"min": 6, "max": 10}}},
        },
        "C": {"ageCriteria": {"min": 30, "max": 40}},
        "D": {
            "studentMarksWrapperCriteria": {"marksCriteria": {"MATH": {"min": 1, "max": 4}}},
        },
        "E": {},
    }


@pytest.fixture
def registry(raw_class_criteria):
    """An isolated registry per test."""
    return ClassCriteriaRegistry.from_dict(raw_class_criteria)


@pytest.fixture
def analyser(registry):
    return CriteriaAnalyser(registry)
