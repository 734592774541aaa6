"""
Django-Filterable Views

Class-based view integration.

Example:
    # views.py
    from django.views.generic import ListView
    from django_filterable.views import FilterableMixin
    from myapp.models import Booking

    class BookingListView(FilterableMixin, ListView):
        model = Booking
        filterable_filters = {
            'status': 'equal',
            'customer.name': 'like',
        }
        filterable_sorters = {
            'created_at': 'order_by',
        }

    # GET /bookings/?filter[status]=confirmed&sortBy=created_at&desc=1
"""

from django_filterable.filterable import Filterable


class FilterableMixin:
    """
    Applies a Filterable to the queryset of a list view.

    Must come before the view class providing get_queryset() in the MRO.
    """

    # Optional: key -> filter (instance, class, alias or dotted path)
    filterable_filters = None

    # Optional: sort-by value -> sorter
    filterable_sorters = None

    # Optional: override the USE_DEFAULT_FILTER / USE_DEFAULT_SORTER settings
    use_default_filter = None
    use_default_sorter = None

    # Optional: FilterableSettings used instead of the global settings
    filterable_config = None

    filterable_class = Filterable

    def get_filterable_filters(self):
        """Get filter registrations. Override for dynamic filters."""
        return self.filterable_filters or {}

    def get_filterable_sorters(self):
        """Get sorter registrations. Override for dynamic sorters."""
        return self.filterable_sorters or {}

    def get_filterable(self, queryset):
        """Build the Filterable for this request."""
        filterable = self.filterable_class(self.request, config=self.filterable_config)
        filterable.query(queryset)
        filterable.register_filters(self.get_filterable_filters())
        filterable.register_sorters(self.get_filterable_sorters())

        if self.use_default_filter is True:
            filterable.enable_default_filter()
        elif self.use_default_filter is False:
            filterable.disable_default_filter()

        if self.use_default_sorter is True:
            filterable.enable_default_sorter()
        elif self.use_default_sorter is False:
            filterable.disable_default_sorter()

        return filterable

    def get_queryset(self):
        return self.get_filterable(super().get_queryset()).filter()
