"""
Django-Filterable Exceptions
"""


class FilterException(Exception):
    """Raised when a filter or sorter cannot be registered or resolved."""
