"""
Django-Filterable Sorters
"""

from django_filterable.contracts import Sorter
from django_filterable.filters import to_field_path


class OrderBy(Sorter):
    """
    Order by a single column using the queryset's own order_by().

    The direction argument alone decides the order: a "-" or "+" prefix on the
    column is dropped, and random ordering ("?") is refused.
    """

    def __call__(self, queryset, column, direction):
        field_path = to_field_path(column.lstrip("-+"))
        if not field_path or "?" in field_path:
            return queryset
        if direction == "desc":
            field_path = f"-{field_path}"
        return queryset.order_by(field_path)
