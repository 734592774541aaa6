"""
Django-Filterable Filters

Concrete Filter strategies built on Django field lookups.

Keys use dot notation for relations ("customer.name") and are converted to
Django's double underscore paths before the lookup is applied.
"""

from django_filterable.contracts import Filter
from django_filterable.request import parse_bool


# Django ORM lookups accepted as a key suffix by the Lookup filter
OPERATORS = {
    # Comparisons
    "lt",
    "lte",
    "gt",
    "gte",
    "exact",
    "iexact",
    "in",
    "isnull",
    "range",
    # Text
    "contains",
    "icontains",
    "startswith",
    "istartswith",
    "endswith",
    "iendswith",
    # Date/Time
    "date",
    "year",
    "month",
    "day",
    "week_day",
    "hour",
    "minute",
    "second",
}


def to_field_path(key):
    """
    Convert a dotted request key to a Django field path.

    Examples:
        >>> to_field_path("status")
        'status'
        >>> to_field_path("customer.address.zip")
        'customer__address__zip'
    """
    return "__".join(part for part in key.split(".") if part)


def parse_filter_key(key):
    """
    Parse a filter key into (field_path, operator).

    Converts dot notation to Django's double underscore format and
    extracts any operator suffix.

    Args:
        key: Filter key string (e.g., "customer.name.icontains")

    Returns:
        Tuple of (field_path, operator) where operator may be None

    Examples:
        >>> parse_filter_key("status")
        ('status', None)
        >>> parse_filter_key("customer.name.icontains")
        ('customer__name', 'icontains')
    """
    parts = key.split(".")

    if len(parts) > 1 and parts[-1] in OPERATORS:
        return to_field_path(".".join(parts[:-1])), parts[-1]

    return to_field_path(key), None


def split_list(value):
    """Turn a comma-separated string into a list; lists pass through."""
    if isinstance(value, (list, tuple)):
        return list(value)
    if value is None:
        return []
    return [item.strip() for item in str(value).split(",") if item.strip()]


class LookupFilter(Filter):
    """
    Filter on `<key>__<lookup>=<value>`.

    Subclasses set `lookup` and may override `prepare_value`.
    """

    lookup = "exact"

    def prepare_value(self, value):
        return value

    def __call__(self, queryset, key, value):
        field_path = to_field_path(key)
        return queryset.filter(**{f"{field_path}__{self.lookup}": self.prepare_value(value)})


class Equal(LookupFilter):
    lookup = "exact"


class Like(LookupFilter):
    """Case-insensitive substring match."""

    lookup = "icontains"


class StartsWith(LookupFilter):
    lookup = "istartswith"


class EndsWith(LookupFilter):
    lookup = "iendswith"


class In(LookupFilter):
    """Accepts a list or a comma-separated string ("a,b,c")."""

    lookup = "in"

    def prepare_value(self, value):
        return split_list(value)


class GreaterThan(LookupFilter):
    lookup = "gt"


class GreaterThanOrEqual(LookupFilter):
    lookup = "gte"


class LessThan(LookupFilter):
    lookup = "lt"


class LessThanOrEqual(LookupFilter):
    lookup = "lte"


class IsNull(LookupFilter):
    lookup = "isnull"

    def prepare_value(self, value):
        return parse_bool(value)


class Lookup(Filter):
    """
    Filter whose operator is carried by the key itself.

    Examples:
        price.gte=100      -> price__gte=100
        customer.name=Ann  -> customer__name=Ann
        status.in=a,b      -> status__in=["a", "b"]
    """

    def __call__(self, queryset, key, value):
        field_path, operator = parse_filter_key(key)

        if operator is None:
            return queryset.filter(**{field_path: value})

        if operator in ("in", "range"):
            value = split_list(value)
        elif operator == "isnull":
            value = parse_bool(value)

        return queryset.filter(**{f"{field_path}__{operator}": value})
