"""Route template normalization.

Only registered route templates are normalized here, never concrete request
URLs: a literal segment such as ``/reports/2024`` must stay literal.
"""

WILDCARD = "*"


def _is_dynamic(segment: str) -> bool:
    if segment.startswith(":") and len(segment) > 1:
        return True
    # Starlette style: {name} or {name:converter}
    return len(segment) > 2 and segment.startswith("{") and segment.endswith("}")


def normalize_path(template: str) -> str:
    """Replace every dynamic segment of a route template with ``*``.

    ``/a/:x/b/{y}`` becomes ``/a/*/b/*``. Already normalized patterns are
    returned unchanged.
    """
    segments = [
        WILDCARD if _is_dynamic(segment) else segment
        for segment in template.split("/")
    ]
    pattern = "/".join(segments)
    if len(pattern) > 1 and pattern.endswith("/"):
        pattern = pattern.rstrip("/") or "/"
    return pattern


def route_key(method: str, template: str) -> str:
    """Build the ``"METHOD pattern"`` lookup key for a route template."""
    return f"{method.strip().upper()} {normalize_path(template)}"


def strip_prefix(template: str, prefix: str) -> str:
    """Drop the router mount prefix (e.g. ``/api``) from a template."""
    prefix = prefix.rstrip("/")
    if not prefix:
        return template
    if template == prefix:
        return "/"
    if template.startswith(prefix + "/"):
        return template[len(prefix):]
    return template
