"""
Django-Filterable Settings

Configuration is read from Django settings under the DJANGO_FILTERABLE key.
All settings have sensible defaults.

Example:
    # settings.py
    DJANGO_FILTERABLE = {
        'KEYS': {'filter': 'filter', 'sort_by': 'sort', 'sort_desc': 'desc'},
        'USE_DEFAULT_FILTER': True,
        'DEFAULT_FILTER': 'like',
        'FILTERS': {'active': 'myapp.filters.Active'},
    }
"""

from django.conf import settings

DEFAULTS = {
    # Request input keys
    "KEYS": {
        "filter": "filter",
        "sort_by": "sortBy",
        "sort_desc": "desc",
    },
    # Fallback handlers for keys without a registered one
    "DEFAULT_FILTER": "equal",
    "DEFAULT_SORTER": "order_by",
    "USE_DEFAULT_FILTER": False,
    "USE_DEFAULT_SORTER": False,
    # Aliases usable at registration (value: class or dotted path)
    "FILTERS": {
        "equal": "django_filterable.filters.Equal",
        "like": "django_filterable.filters.Like",
        "starts_with": "django_filterable.filters.StartsWith",
        "ends_with": "django_filterable.filters.EndsWith",
        "in": "django_filterable.filters.In",
        "gt": "django_filterable.filters.GreaterThan",
        "gte": "django_filterable.filters.GreaterThanOrEqual",
        "lt": "django_filterable.filters.LessThan",
        "lte": "django_filterable.filters.LessThanOrEqual",
        "is_null": "django_filterable.filters.IsNull",
        "lookup": "django_filterable.filters.Lookup",
    },
    "SORTERS": {
        "order_by": "django_filterable.sorters.OrderBy",
    },
}

# Settings whose user value is merged over the default instead of replacing it
MERGED = {"KEYS", "FILTERS", "SORTERS"}


class FilterableSettings:
    """
    A settings object that allows django-filterable settings to be accessed as
    properties. For example:

        from django_filterable.conf import filterable_settings
        print(filterable_settings.KEYS["filter"])

    Settings can be overridden in Django settings.py under DJANGO_FILTERABLE
    key, or per instance by passing `user_settings` explicitly.
    """

    def __init__(self, defaults=None, user_settings=None):
        self.defaults = defaults or DEFAULTS
        self._cached_attrs = set()
        self._explicit_settings = user_settings

    @property
    def user_settings(self):
        if self._explicit_settings is not None:
            return self._explicit_settings
        if not hasattr(self, "_user_settings"):
            self._user_settings = getattr(settings, "DJANGO_FILTERABLE", {})
        return self._user_settings

    def __getattr__(self, attr):
        if attr.startswith("_") or attr not in self.defaults:
            raise AttributeError(f"Invalid django-filterable setting: '{attr}'")

        try:
            val = self.user_settings[attr]
            if attr in MERGED:
                val = {**self.defaults[attr], **val}
        except KeyError:
            val = self.defaults[attr]

        self._cached_attrs.add(attr)
        setattr(self, attr, val)
        return val

    def get_key(self, name):
        """Return the request input key configured for `name`."""
        return self.KEYS[name]

    def reload(self):
        """Reload settings (useful for testing)."""
        for attr in self._cached_attrs:
            try:
                delattr(self, attr)
            except AttributeError:
                pass
        self._cached_attrs.clear()
        if hasattr(self, "_user_settings"):
            delattr(self, "_user_settings")


filterable_settings = FilterableSettings(DEFAULTS)
