"""
Tests for django_filterable.filters and django_filterable.sorters modules.
"""

from unittest.mock import MagicMock

import pytest


class TestParseFilterKey:
    """Tests for parse_filter_key function."""

    def test_simple_field(self):
        from django_filterable.filters import parse_filter_key

        field, op = parse_filter_key("status")
        assert field == "status"
        assert op is None

    def test_dotted_field(self):
        from django_filterable.filters import parse_filter_key

        field, op = parse_filter_key("customer.name")
        assert field == "customer__name"
        assert op is None

    def test_operator_suffix(self):
        from django_filterable.filters import parse_filter_key

        field, op = parse_filter_key("customer.address.zip.lt")
        assert field == "customer__address__zip"
        assert op == "lt"

    def test_bare_operator_name_is_a_field(self):
        from django_filterable.filters import parse_filter_key

        field, op = parse_filter_key("date")
        assert field == "date"
        assert op is None


class TestSplitList:
    def test_comma_separated(self):
        from django_filterable.filters import split_list

        assert split_list("a, b,,c") == ["a", "b", "c"]

    def test_list_passes_through(self):
        from django_filterable.filters import split_list

        assert split_list(["a", "b"]) == ["a", "b"]

    def test_none(self):
        from django_filterable.filters import split_list

        assert split_list(None) == []


class TestLookupFilters:
    """Tests for the built-in LookupFilter subclasses."""

    @pytest.mark.parametrize(
        "name, lookup",
        [
            ("Equal", "exact"),
            ("Like", "icontains"),
            ("StartsWith", "istartswith"),
            ("EndsWith", "iendswith"),
            ("GreaterThan", "gt"),
            ("GreaterThanOrEqual", "gte"),
            ("LessThan", "lt"),
            ("LessThanOrEqual", "lte"),
        ],
    )
    def test_lookup(self, name, lookup):
        from django_filterable import filters

        queryset = MagicMock()
        result = getattr(filters, name)()(queryset, "price", "10")

        queryset.filter.assert_called_once_with(**{f"price__{lookup}": "10"})
        assert result is queryset.filter.return_value

    def test_dotted_key(self):
        from django_filterable.filters import Like

        queryset = MagicMock()
        Like()(queryset, "customer.name", "khan")

        queryset.filter.assert_called_once_with(customer__name__icontains="khan")

    def test_in_splits_string(self):
        from django_filterable.filters import In

        queryset = MagicMock()
        In()(queryset, "status", "confirmed,completed")

        queryset.filter.assert_called_once_with(status__in=["confirmed", "completed"])

    def test_in_accepts_list(self):
        from django_filterable.filters import In

        queryset = MagicMock()
        In()(queryset, "status", ["confirmed", "completed"])

        queryset.filter.assert_called_once_with(status__in=["confirmed", "completed"])

    def test_is_null_parses_flag(self):
        from django_filterable.filters import IsNull

        queryset = MagicMock()
        IsNull()(queryset, "deleted_at", "0")

        queryset.filter.assert_called_once_with(deleted_at__isnull=False)


class TestLookup:
    """Tests for the Lookup filter (operator carried by the key)."""

    def test_plain_key_is_equality(self):
        from django_filterable.filters import Lookup

        queryset = MagicMock()
        Lookup()(queryset, "customer.name", "Ann")

        queryset.filter.assert_called_once_with(customer__name="Ann")

    def test_operator_key(self):
        from django_filterable.filters import Lookup

        queryset = MagicMock()
        Lookup()(queryset, "price.gte", "100")

        queryset.filter.assert_called_once_with(price__gte="100")

    def test_range_splits(self):
        from django_filterable.filters import Lookup

        queryset = MagicMock()
        Lookup()(queryset, "price.range", "10,20")

        queryset.filter.assert_called_once_with(price__range=["10", "20"])

    def test_isnull(self):
        from django_filterable.filters import Lookup

        queryset = MagicMock()
        Lookup()(queryset, "cleaner.isnull", "true")

        queryset.filter.assert_called_once_with(cleaner__isnull=True)


class TestOrderBy:
    """Tests for the OrderBy sorter."""

    def test_ascending(self):
        from django_filterable.sorters import OrderBy

        queryset = MagicMock()
        result = OrderBy()(queryset, "created_at", "asc")

        queryset.order_by.assert_called_once_with("created_at")
        assert result is queryset.order_by.return_value

    def test_descending(self):
        from django_filterable.sorters import OrderBy

        queryset = MagicMock()
        OrderBy()(queryset, "created_at", "desc")

        queryset.order_by.assert_called_once_with("-created_at")

    def test_leading_minus_is_dropped(self):
        from django_filterable.sorters import OrderBy

        queryset = MagicMock()
        OrderBy()(queryset, "-username", "asc")

        queryset.order_by.assert_called_once_with("username")

    def test_leading_plus_is_dropped(self):
        from django_filterable.sorters import OrderBy

        queryset = MagicMock()
        OrderBy()(queryset, "+username", "desc")

        queryset.order_by.assert_called_once_with("-username")

    @pytest.mark.parametrize("column", ["?", "-?", "-", ""])
    def test_unusable_column_keeps_queryset(self, column):
        from django_filterable.sorters import OrderBy

        queryset = MagicMock()
        result = OrderBy()(queryset, column, "asc")

        assert result is queryset
        queryset.order_by.assert_not_called()

    def test_dotted_column(self):
        from django_filterable.sorters import OrderBy

        queryset = MagicMock()
        OrderBy()(queryset, "customer.name", "desc")

        queryset.order_by.assert_called_once_with("-customer__name")
