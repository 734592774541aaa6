"""
Django-Filterable Contracts

Base classes every filter and sorter must implement. Registration rejects
anything that is not a subclass (or an instance) of these.
"""

from abc import ABC, abstractmethod


class Filter(ABC):
    """
    Applies a constraint to a queryset.

    Example:
        class Active(Filter):
            def __call__(self, queryset, key, value):
                return queryset.filter(is_active=parse_bool(value))
    """

    @abstractmethod
    def __call__(self, queryset, key, value):
        """Return the queryset constrained by `key` and `value`."""


class Sorter(ABC):
    """
    Applies an ordering to a queryset.

    `direction` is either "asc" or "desc".
    """

    @abstractmethod
    def __call__(self, queryset, column, direction):
        """Return the queryset ordered by `column`."""
