"""
Django-Filterable Request Input

Reads filter and sort parameters from a Django HttpRequest.

Values are looked up in a JSON body first, then POST data, then the query
string. Filter mappings may be sent as:
- bracket keys:   ?filter[status]=active&filter[customer.name]=ann
- a JSON object:  ?filter={"status": "active"}
- a JSON body:    {"filter": {"status": "active"}}
"""

import json
import logging

logger = logging.getLogger("django_filterable")

FALSE_VALUES = {"", "0", "false", "no", "off", "null"}


def parse_bool(value):
    """
    Interpret a request flag.

    Examples:
        >>> parse_bool("1"), parse_bool("true"), parse_bool("0"), parse_bool("false")
        (True, True, False, False)
    """
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_VALUES
    return bool(value)


def get_json_body(request):
    """Return the decoded JSON body, or None when there isn't one."""
    if not hasattr(request, "_filterable_json"):
        data = None
        if getattr(request, "content_type", "") == "application/json" and request.body:
            try:
                data = json.loads(request.body)
            except (json.JSONDecodeError, UnicodeDecodeError):
                logger.debug("Ignoring malformed JSON request body")
        request._filterable_json = data
    return request._filterable_json


def _query_dict_value(source, key):
    values = source.getlist(key)
    return values[0] if len(values) == 1 else values


def get_input(request, key, default=None):
    """
    Return the raw input value for `key`.

    Repeated query string keys come back as a list.
    """
    data = get_json_body(request)
    if isinstance(data, dict) and key in data:
        return data[key]

    for source in (request.POST, request.GET):
        if key in source:
            return _query_dict_value(source, key)

    return default


def get_bracket_input(request, key):
    """
    Collect `key[name]=value` pairs into a dict.

    `key[name][]=a&key[name][]=b` always produces a list. Nested keys such as
    `key[a][b]` are skipped.
    POST values override query string values with the same name.
    """
    prefix = f"{key}["
    mapping = {}

    for source in (request.GET, request.POST):
        for name in source:
            if not (name.startswith(prefix) and name.endswith("]")):
                continue

            inner = name[len(prefix) : -1]
            force_list = inner.endswith("][")
            if force_list:
                inner = inner[:-2]
            # Nested keys (key[a][b]) are not supported
            if not inner or "[" in inner or "]" in inner:
                continue

            mapping[inner] = source.getlist(name) if force_list else _query_dict_value(source, name)

    return mapping


def get_mapping_input(request, key):
    """
    Return the input for `key` as a dict, or None when it isn't one.

    Args:
        request: Django HttpRequest
        key: Input name (e.g., "filter")

    Returns:
        Dict of name -> value, or None
    """
    value = get_input(request, key)

    if isinstance(value, dict):
        return value

    if isinstance(value, str) and value:
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            decoded = None
        if isinstance(decoded, dict):
            return decoded

    return get_bracket_input(request, key) or None
