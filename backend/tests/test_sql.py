"""Tests for the partial-update and dynamic-filter fragment builders."""

import re
from decimal import Decimal

import pytest

from app.utils.sql import (
    COMPANY_COLUMNS,
    COMPANY_FILTERS,
    JOB_COLUMNS,
    JOB_FILTERS,
    FilterRule,
    QueryBuildError,
    as_number,
    as_substring,
    sql_for_filters,
    sql_for_partial_update,
    where_clause,
)


def _substitute(fragment, values):
    """Inline bind values by ordinal, to read a fragment the way the store would."""
    return re.sub(r"\$(\d+)", lambda m: repr(values[int(m.group(1)) - 1]), fragment)


class TestPartialUpdate:
    def test_renames_mapped_field(self):
        set_cols, values = sql_for_partial_update({"numEmployees": 5}, {"numEmployees": "num_employees"})
        assert set_cols == '"num_employees"=$1'
        assert values == [5]

    def test_unmapped_field_used_verbatim(self):
        set_cols, values = sql_for_partial_update({"name": "Acme"}, {})
        assert set_cols == '"name"=$1'
        assert values == ["Acme"]

    def test_keeps_insertion_order(self):
        fields = {"logoUrl": "http://a.img", "name": "Acme", "numEmployees": 3}
        set_cols, values = sql_for_partial_update(fields, COMPANY_COLUMNS)
        assert set_cols == '"logo_url"=$1, "name"=$2, "num_employees"=$3'
        assert values == ["http://a.img", "Acme", 3]

    @pytest.mark.parametrize("size", [1, 2, 4, 7])
    def test_ordinals_are_contiguous(self, size):
        fields = {f"f{i}": i * 10 for i in range(size)}
        set_cols, values = sql_for_partial_update(fields, {})

        clauses = set_cols.split(", ")
        assert len(clauses) == size
        assert [int(c.rsplit("$", 1)[1]) for c in clauses] == list(range(1, size + 1))
        assert values == [i * 10 for i in range(size)]

    @pytest.mark.parametrize("name_map", [{}, COMPANY_COLUMNS, {"a": "b"}])
    def test_empty_fields_rejected(self, name_map):
        with pytest.raises(QueryBuildError, match="No data"):
            sql_for_partial_update({}, name_map)

    def test_none_value_is_still_bound(self):
        set_cols, values = sql_for_partial_update({"logoUrl": None}, COMPANY_COLUMNS)
        assert set_cols == '"logo_url"=$1'
        assert values == [None]

    def test_job_columns_pass_through(self):
        set_cols, values = sql_for_partial_update({"title": "New", "salary": 100}, JOB_COLUMNS)
        assert set_cols == '"title"=$1, "salary"=$2'
        assert values == ["New", 100]


class TestTransforms:
    @pytest.mark.parametrize("value", [0, 10, 2.5, Decimal("3")])
    def test_as_number_accepts_numbers(self, value):
        assert as_number(value) == value

    @pytest.mark.parametrize("value", ["10", "abc", True, False, [1], {}])
    def test_as_number_rejects_non_numbers(self, value):
        with pytest.raises(QueryBuildError):
            as_number(value)

    def test_as_substring_wraps_in_wildcards(self):
        assert as_substring("tech") == "%tech%"

    def test_as_substring_rejects_non_string(self):
        with pytest.raises(QueryBuildError):
            as_substring(5)


class TestCompanyFilters:
    def test_empty_criteria(self):
        assert sql_for_filters({}, COMPANY_FILTERS) == ("", [])

    def test_all_none_is_empty(self):
        criteria = {"minEmployees": None, "maxEmployees": None, "nameLike": None}
        assert sql_for_filters(criteria, COMPANY_FILTERS) == ("", [])

    def test_min_and_name(self):
        where, values = sql_for_filters({"minEmployees": 10, "nameLike": "tech"}, COMPANY_FILTERS)
        assert where == "num_employees > $1 AND name ILIKE $2"
        assert values == [10, "%tech%"]

    def test_ordinals_follow_rule_order_not_input_order(self):
        criteria = {"nameLike": "net", "maxEmployees": 500, "minEmployees": 10}
        where, values = sql_for_filters(criteria, COMPANY_FILTERS)
        assert where == "num_employees > $1 AND num_employees < $2 AND name ILIKE $3"
        assert values == [10, 500, "%net%"]

    def test_max_only(self):
        assert sql_for_filters({"maxEmployees": 3}, COMPANY_FILTERS) == ("num_employees < $1", [3])

    def test_bounds_are_exclusive(self):
        where, values = sql_for_filters({"minEmployees": 5, "maxEmployees": 5}, COMPANY_FILTERS)
        assert ">=" not in where and "<=" not in where
        assert _substitute(where, values) == "num_employees > 5 AND num_employees < 5"

    def test_min_greater_than_max_not_checked_here(self):
        where, values = sql_for_filters({"minEmployees": 9, "maxEmployees": 1}, COMPANY_FILTERS)
        assert values == [9, 1]

    def test_zero_bound_is_applied(self):
        assert sql_for_filters({"minEmployees": 0}, COMPANY_FILTERS) == ("num_employees > $1", [0])

    def test_empty_name_is_ignored(self):
        assert sql_for_filters({"nameLike": ""}, COMPANY_FILTERS) == ("", [])

    def test_injection_text_stays_in_values(self):
        where, values = sql_for_filters({"nameLike": "x'; DROP TABLE companies; --"}, COMPANY_FILTERS)
        assert where == "name ILIKE $1"
        assert values == ["%x'; DROP TABLE companies; --%"]

    def test_non_numeric_bound_rejected(self):
        with pytest.raises(QueryBuildError):
            sql_for_filters({"minEmployees": "ten"}, COMPANY_FILTERS)

    def test_unknown_keys_ignored(self):
        assert sql_for_filters({"handle": "c1", "limit": 3}, COMPANY_FILTERS) == ("", [])


class TestJobFilters:
    def test_empty_criteria(self):
        assert sql_for_filters({}, JOB_FILTERS) == ("", [])

    def test_has_equity_consumes_no_ordinal(self):
        where, values = sql_for_filters({"minSalary": 50000, "hasEquity": True, "title": "eng"}, JOB_FILTERS)
        assert where == "salary > $1 AND equity > 0 AND title ILIKE $2"
        assert values == [50000, "%eng%"]

    def test_has_equity_alone(self):
        assert sql_for_filters({"hasEquity": True}, JOB_FILTERS) == ("equity > 0", [])

    def test_has_equity_false_contributes_nothing(self):
        assert sql_for_filters({"hasEquity": False, "title": "eng"}, JOB_FILTERS) == ("title ILIKE $1", ["%eng%"])

    def test_has_equity_must_be_bool(self):
        with pytest.raises(QueryBuildError):
            sql_for_filters({"hasEquity": "yes"}, JOB_FILTERS)

    def test_non_numeric_salary_rejected(self):
        with pytest.raises(QueryBuildError):
            sql_for_filters({"minSalary": "lots"}, JOB_FILTERS)

    def test_substituted_fragment_reads_as_intended(self):
        where, values = sql_for_filters({"title": "dev", "minSalary": 10}, JOB_FILTERS)
        assert _substitute(where, values) == "salary > 10 AND title ILIKE '%dev%'"


def test_rule_without_transform_binds_raw_value():
    rules = (FilterRule("handle", "company_handle", "="),)
    assert sql_for_filters({"handle": "c1"}, rules) == ("company_handle = $1", ["c1"])


def test_where_clause():
    assert where_clause("") == ""
    assert where_clause("salary > $1") == " WHERE salary > $1"
