"""
Django-Filterable Decorators

Provides a function decorator that hands views a queryset already filtered
and sorted from the request.
"""

from functools import wraps

from django_filterable.conf import filterable_settings
from django_filterable.contracts import Filter, Sorter
from django_filterable.filterable import Filterable, parse_handler


def filterable_view(
    model=None,
    queryset=None,
    filters=None,
    sorters=None,
    use_default_filter=None,
    use_default_sorter=None,
    config=None,
):
    """
    Decorator for adding request filtering to a view.

    The decorated function receives an additional `queryset` keyword argument.
    Handlers are validated when the decorator is applied, so an invalid
    registration fails at import time instead of on the first request.

    Args:
        model: Model class or "app_label.Model" to start from
        queryset: Callable taking the request and returning the base queryset
            (alternative to `model`)
        filters: Dict of key -> filter
        sorters: Dict of sort-by value -> sorter
        use_default_filter: Override USE_DEFAULT_FILTER (None keeps the setting)
        use_default_sorter: Override USE_DEFAULT_SORTER (None keeps the setting)
        config: Optional FilterableSettings

    Example:
        from django_filterable import filterable_view
        from myapp.models import Booking

        @filterable_view(
            model=Booking,
            filters={'status': 'equal', 'customer.name': 'like'},
            sorters={'created_at': 'order_by'},
        )
        def booking_list(request, queryset):
            return render(request, 'bookings.html', {'bookings': queryset})
    """
    if model is None and queryset is None:
        raise TypeError("filterable_view() requires either model or queryset")

    settings = config or filterable_settings
    resolved_filters = {
        key: parse_handler(handler, settings.FILTERS, Filter, "filter") for key, handler in (filters or {}).items()
    }
    resolved_sorters = {
        key: parse_handler(handler, settings.SORTERS, Sorter, "sorter") for key, handler in (sorters or {}).items()
    }

    def decorator(view_func):
        @wraps(view_func)
        def wrapped_view(request, *args, **kwargs):
            instance = Filterable(request, config=config)

            if queryset is not None:
                instance.query(queryset(request))
            else:
                instance.model(model)

            instance.register_filters(resolved_filters)
            instance.register_sorters(resolved_sorters)

            if use_default_filter is not None:
                instance.use_default_filter = use_default_filter
            if use_default_sorter is not None:
                instance.use_default_sorter = use_default_sorter

            kwargs["queryset"] = instance.filter()
            return view_func(request, *args, **kwargs)

        return wrapped_view

    return decorator
