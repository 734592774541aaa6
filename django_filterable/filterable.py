"""
Django-Filterable Core

The Filterable maps request keys to registered Filter and Sorter strategies
and applies them to a queryset.

Example:
    from django_filterable import Filterable

    queryset = (
        Filterable(request)
        .model(Booking)
        .register_filters({"status": "equal", "customer.name": "like"})
        .register_sorter("created_at", "order_by")
        .filter()
    )

    # GET /bookings/?filter[status]=confirmed&sortBy=created_at&desc=1
"""

import inspect
import logging

from django.apps import apps
from django.utils.module_loading import import_string

from django_filterable.conf import filterable_settings
from django_filterable.contracts import Filter, Sorter
from django_filterable.exceptions import FilterException
from django_filterable.request import get_input, get_mapping_input, parse_bool


logger = logging.getLogger("django_filterable")


def is_handler_class(value, contract):
    """True for concrete subclasses of `contract` (the contract itself excluded)."""
    return (
        inspect.isclass(value)
        and issubclass(value, contract)
        and value is not contract
        and not inspect.isabstract(value)
    )


def parse_handler(handler, aliases, contract, kind):
    """
    Resolve a handler given at registration.

    Args:
        handler: Contract instance, contract subclass, alias name or dotted path
        aliases: Mapping of alias name -> class or dotted path
        contract: Filter or Sorter
        kind: "filter" or "sorter", used in the error message

    Returns:
        The handler instance or class

    Raises:
        FilterException: If the handler doesn't implement `contract`
    """
    original = handler

    if isinstance(handler, str) and handler in aliases:
        handler = aliases[handler]

    if isinstance(handler, str):
        try:
            handler = import_string(handler)
        except ImportError as e:
            raise FilterException(f"Class [{original}] is not a valid {kind}.") from e

    if isinstance(handler, contract) or is_handler_class(handler, contract):
        return handler

    raise FilterException(f"Class [{original}] is not a valid {kind}.")


def instantiate(handler):
    """Instantiate a lazily registered handler class."""
    return handler() if inspect.isclass(handler) else handler


class Filterable:
    """
    Applies request driven filtering and sorting to a queryset.

    Filters are looked up by the keys of the filter input; the sorter by the
    value of the sort-by input. Keys without a registered handler fall back
    to the configured default when defaults are enabled, and are ignored
    otherwise.

    Example:
        filterable = Filterable(request)
        filterable.query(Booking.objects.filter(company=company))
        filterable.register_filter("status", Equal)
        filterable.enable_default_sorter()
        queryset = filterable.filter()
    """

    def __init__(self, request, config=None):
        """
        Initialize a Filterable.

        Args:
            request: Django HttpRequest to read input from
            config: Optional FilterableSettings (defaults to filterable_settings)
        """
        self.request = request
        self.config = config or filterable_settings
        self.queryset = None
        self.filters = {}
        self.sorters = {}

        # None defers to the USE_DEFAULT_* settings
        self.use_default_filter = None
        self.use_default_sorter = None

    def model(self, model):
        """Start from all rows of `model` (a model class or "app_label.Model")."""
        if isinstance(model, str):
            model = apps.get_model(model)
        return self.query(model._default_manager.all())

    def query(self, queryset):
        """Set the queryset to filter."""
        self.queryset = queryset
        return self

    def get_queryset(self):
        return self.queryset

    def enable_default_filter(self):
        self.use_default_filter = True
        return self

    def disable_default_filter(self):
        self.use_default_filter = False
        return self

    def enable_default_sorter(self):
        self.use_default_sorter = True
        return self

    def disable_default_sorter(self):
        self.use_default_sorter = False
        return self

    def register_filters(self, filters):
        for key, handler in filters.items():
            self.register_filter(key, handler)
        return self

    def register_filter(self, key, handler):
        """
        Register a filter for a request key.

        `handler` may be a Filter instance, a Filter subclass (instantiated
        when used), an alias from the FILTERS setting, or a dotted path.
        """
        self.filters[key] = parse_handler(handler, self.config.FILTERS, Filter, "filter")
        return self

    def register_sorters(self, sorters):
        for key, handler in sorters.items():
            self.register_sorter(key, handler)
        return self

    def register_sorter(self, key, handler):
        """Register a sorter for a sort-by value. Accepts the same forms as register_filter."""
        self.sorters[key] = parse_handler(handler, self.config.SORTERS, Sorter, "sorter")
        return self

    def has_filter(self, key):
        return key in self.filters

    def get_filter(self, key):
        return self.filters[key]

    def has_sorter(self, key):
        return key in self.sorters

    def get_sorter(self, key):
        return self.sorters[key]

    def should_use_default_filter(self):
        if self.use_default_filter is not None:
            return self.use_default_filter
        return bool(self.config.USE_DEFAULT_FILTER)

    def should_use_default_sorter(self):
        if self.use_default_sorter is not None:
            return self.use_default_sorter
        return bool(self.config.USE_DEFAULT_SORTER)

    def filter(self):
        """
        Apply the filters and the sorter selected by the request.

        Returns:
            The resulting queryset

        Raises:
            FilterException: If no queryset was set, or a configured default
                handler is invalid
        """
        if self.queryset is None:
            raise FilterException("No queryset to filter, call model() or query() first.")

        self.handle_filtering()
        self.handle_sorting()

        return self.get_queryset()

    def handle_filtering(self):
        parameters = get_mapping_input(self.request, self.config.get_key("filter"))

        if not isinstance(parameters, dict):
            return

        for key, value in parameters.items():
            invokable = self.get_invokable_filter(key)

            if invokable is None:
                logger.debug("No filter for key '%s', skipping", key)
                continue

            logger.debug("Applying %s to '%s'", type(invokable).__name__, key)
            self._apply(invokable(self.queryset, key, value))

    def get_invokable_filter(self, key):
        if self.has_filter(key):
            handler = self.get_filter(key)
        elif self.should_use_default_filter():
            handler = parse_handler(self.config.DEFAULT_FILTER, self.config.FILTERS, Filter, "filter")
        else:
            return None

        return instantiate(handler)

    def handle_sorting(self):
        sort_by = get_input(self.request, self.config.get_key("sort_by"))
        sort_desc = get_input(self.request, self.config.get_key("sort_desc"))

        # "0" counts as empty
        if not isinstance(sort_by, str) or sort_by in ("", "0"):
            return

        invokable = self.get_invokable_sorter(sort_by)

        if invokable is None:
            logger.debug("No sorter for '%s', skipping", sort_by)
            return

        direction = "desc" if parse_bool(sort_desc) else "asc"
        logger.debug("Sorting by '%s' %s with %s", sort_by, direction, type(invokable).__name__)
        self._apply(invokable(self.queryset, sort_by, direction))

    def get_invokable_sorter(self, key):
        if self.has_sorter(key):
            handler = self.get_sorter(key)
        elif self.should_use_default_sorter():
            handler = parse_handler(self.config.DEFAULT_SORTER, self.config.SORTERS, Sorter, "sorter")
        else:
            return None

        return instantiate(handler)

    def _apply(self, result):
        # Querysets are immutable, handlers hand back the new one
        if result is not None:
            self.queryset = result
