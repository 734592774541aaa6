"""
Django-Filterable: request driven filtering and sorting for Django querysets

Maps the filter and sort parameters of an incoming request to registered
Filter and Sorter strategies, falling back to configurable defaults.

Example:
    from django_filterable import Filterable

    queryset = (
        Filterable(request)
        .model(Booking)
        .register_filters({'status': 'equal', 'customer.name': 'like'})
        .register_sorter('created_at', 'order_by')
        .filter()
    )

    # GET /bookings/?filter[status]=confirmed&sortBy=created_at&desc=1
"""

__version__ = "26.10.0"

# Core
from django_filterable.filterable import Filterable

# Contracts
from django_filterable.contracts import Filter, Sorter

# Filters
from django_filterable.filters import (
    LookupFilter,
    Equal,
    Like,
    StartsWith,
    EndsWith,
    In,
    GreaterThan,
    GreaterThanOrEqual,
    LessThan,
    LessThanOrEqual,
    IsNull,
    Lookup,
    OPERATORS,
)

# Sorters
from django_filterable.sorters import OrderBy

# Exceptions
from django_filterable.exceptions import FilterException

# Views
from django_filterable.views import FilterableMixin

# Decorators
from django_filterable.decorators import filterable_view

# Configuration
from django_filterable.conf import FilterableSettings, filterable_settings

__all__ = [
    # Version
    "__version__",
    # Core
    "Filterable",
    # Contracts
    "Filter",
    "Sorter",
    # Filters
    "LookupFilter",
    "Equal",
    "Like",
    "StartsWith",
    "EndsWith",
    "In",
    "GreaterThan",
    "GreaterThanOrEqual",
    "LessThan",
    "LessThanOrEqual",
    "IsNull",
    "Lookup",
    "OPERATORS",
    # Sorters
    "OrderBy",
    # Exceptions
    "FilterException",
    # Views
    "FilterableMixin",
    # Decorators
    "filterable_view",
    # Settings
    "FilterableSettings",
    "filterable_settings",
]
