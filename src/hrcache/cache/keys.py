from typing import Any, Mapping, Optional


def _format_value(value: Any) -> str:
    # Match the keys the browser client builds for the same request
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def create_cache_key(endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Build a cache key from an endpoint and its query parameters.

    Parameters are sorted by name so the key does not depend on the order
    the caller supplied them in. Values are not URL-encoded: a value that
    contains ``&`` or ``=`` can collide with a different parameter set.

    >>> create_cache_key("/api/employees", {"page": 2, "dept": "hr"})
    '/api/employees?dept=hr&page=2'
    """
    if not params:
        return endpoint

    param_string = "&".join(
        f"{name}={_format_value(params[name])}" for name in sorted(params)
    )
    return f"{endpoint}?{param_string}"
