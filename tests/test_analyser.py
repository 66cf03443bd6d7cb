"""
Unit tests for criteria validation and class combination.
"""

import logging

import pytest

from core.analyser import CriteriaAnalyser, has_free_places, sum_class_counts
from core.criteria import RangeCriteria
from core.registry import ClassCriteriaRegistry
from exceptions.custom_errors import CriteriaConflictError


class TestHelpers:
    def test_sum_excludes_total(self):
        assert sum_class_counts({"S": 10, "A": 3, "B": 2}) == 5

    def test_free_places(self):
        assert has_free_places({"S": 5, "A": 5})
        assert not has_free_places({"S": 5, "A": 6})

    def test_missing_total_is_accepted(self):
        assert has_free_places({"A": 100})


class TestValidate:
    def test_none(self, analyser):
        assert analyser.validate(None) is None

    def test_consistent_criteria_get_remainder(self, analyser, registry):
        parsed = {"S": 10, "A": 3, "B": 2, "C": 1}

        result = analyser.validate(parsed)

        assert result == {"S": 10, "A": 3, "B": 2, "C": 1, "rand": 4}
        assert parsed == {"S": 10, "A": 3, "B": 2, "C": 1}
        assert registry.combined_names() == []

    def test_exact_fit_gives_zero_remainder(self, analyser):
        assert analyser.validate({"S": 5, "A": 5})["rand"] == 0

    def test_missing_total_is_passed_through(self, analyser, registry):
        # No total means no constraint: no combination and no remainder.
        assert analyser.validate({"A": 3, "C": 40}) == {"A": 3, "C": 40}
        assert registry.combined_names() == []

    def test_empty_mapping(self, analyser):
        assert analyser.validate({}) == {}

    def test_conflict_resolved_by_combination(self, analyser, registry):
        result = analyser.validate({"S": 5, "A": 3, "B": 4})

        assert result == {"S": 5, "B": 1, "AB": 3, "rand": 1}
        assert registry.get("AB").age_criteria == RangeCriteria(min=15, max=20)

    def test_incompatible_classes_raise(self, analyser):
        with pytest.raises(CriteriaConflictError) as exc_info:
            analyser.validate({"S": 5, "A": 3, "C": 4})

        assert exc_info.value.code == "CONFLICTS_INPUT_CRITERIA"
        assert str(exc_info.value) == "Combined criteria has conflicts."

    def test_combination_not_enough_raises(self, analyser):
        # A and B merge into AB:3, leaving B:3; 6 students still exceed 4.
        with pytest.raises(CriteriaConflictError):
            analyser.validate({"S": 4, "A": 3, "B": 6})

    def test_analyse_parses_and_validates(self, analyser):
        assert analyser.analyse("10S - 3A2B1C") == {"S": 10, "A": 3, "B": 2, "C": 1, "rand": 4}

    def test_logs_combination_attempt(self, analyser, caplog):
        with caplog.at_level(logging.DEBUG, logger="criteria"):
            with pytest.raises(CriteriaConflictError):
                analyser.validate({"S": 5, "A": 3, "C": 4, "B": 4})

        messages = [r.getMessage() for r in caplog.records]
        assert "Attempt to combine the entered criteria." in messages
        assert any(m.startswith("Parameters cannot be combined. A + C") for m in messages)


class TestCombinePossibleCriteria:
    def test_first_count_larger_keeps_excess(self, analyser):
        assert analyser.combine_possible_criteria({"A": 5, "B": 3}) == {"A": 2, "AB": 3}

    def test_second_count_larger_keeps_excess(self, analyser):
        assert analyser.combine_possible_criteria({"A": 3, "B": 5}) == {"B": 2, "AB": 3}

    def test_equal_counts_are_fully_merged(self, analyser):
        assert analyser.combine_possible_criteria({"A": 3, "B": 3}) == {"AB": 3}

    def test_total_is_never_merged(self, analyser):
        result = analyser.combine_possible_criteria({"S": 10, "A": 5, "B": 3})
        assert result == {"S": 10, "A": 2, "AB": 3}

    def test_input_is_not_modified(self, analyser):
        criteria = {"A": 5, "B": 3}
        analyser.combine_possible_criteria(criteria)
        assert criteria == {"A": 5, "B": 3}

    def test_first_fit_skips_incompatible_candidates(self, analyser, registry):
        # A cannot merge with C, so the first fit is B; C then finds no partner.
        result = analyser.combine_possible_criteria({"A": 2, "C": 2, "B": 2})

        assert result == {"C": 2, "AB": 2}
        assert registry.combined_names() == ["AB"]

    def test_first_fit_stops_at_first_partner(self, analyser, registry):
        # A is compatible with both B and E; B comes first.
        result = analyser.combine_possible_criteria({"A": 4, "B": 1, "E": 1})

        assert result["AB"] == 1
        assert "AE" not in result

    def test_disjoint_marks_prevent_merge(self, analyser):
        assert analyser.combine_possible_criteria({"B": 2, "D": 2}) == {"B": 2, "D": 2}

    def test_unknown_class_is_left_alone(self, analyser, registry):
        result = analyser.combine_possible_criteria({"Z": 2, "C": 3})

        assert result == {"Z": 2, "C": 3}
        assert registry.combined_names() == []

    def test_search_stops_at_unknown_partner(self, analyser, registry):
        # A meets Z before B, so A stays unmerged; B later merges into A.
        result = analyser.combine_possible_criteria({"A": 3, "Z": 1, "B": 2})

        assert "AB" not in result
        assert result == {"A": 1, "Z": 1, "BA": 2}
        assert registry.combined_names() == ["BA"]

    def test_unknown_partner_blocks_later_compatible_class(self, analyser):
        result = analyser.combine_possible_criteria({"A": 3, "Z": 1, "C": 2})
        assert result == {"A": 3, "Z": 1, "C": 2}

    def test_composite_name_taken_by_configured_class(self, raw_class_criteria):
        raw_class_criteria["AB"] = {"ageCriteria": {"min": 1, "max": 2}}
        registry = ClassCriteriaRegistry.from_dict(raw_class_criteria)

        result = CriteriaAnalyser(registry).combine_possible_criteria({"A": 3, "B": 3})

        assert result == {"BA": 3}
        assert registry.get("AB").age_criteria == RangeCriteria(min=1, max=2)
        assert registry.combined_names() == ["BA"]

    def test_composite_is_registered_and_stable(self, analyser, registry):
        analyser.combine_possible_criteria({"A": 5, "B": 3})
        first = registry.get("AB")

        analyser.combine_possible_criteria({"A": 1, "B": 1})

        assert registry.get("AB") == first
        assert first.course_criteria == RangeCriteria(min=2, max=3)
        assert first.marks_criteria.marks_criteria["MATH"] == RangeCriteria(min=6, max=10)
