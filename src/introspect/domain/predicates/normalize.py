"""Canonical forms for comparison fields."""


def normalize_path(path: str) -> str:
    """Ensure path has exactly one leading slash.

    Example: "api/users" -> "/api/users", "//api" -> "/api", "" -> "/"

    Args:
        path: Declared route path

    Returns:
        Path with single leading slash
    """
    return "/" + path.lstrip("/")


def normalize_http_method(method: str) -> str:
    """Upper-case HTTP method ("get" -> "GET")."""
    return method.upper()


def middleware_base_name(token: str) -> str:
    """Middleware name without parameters ("throttle:60,1" -> "throttle")."""
    return token.partition(":")[0]
