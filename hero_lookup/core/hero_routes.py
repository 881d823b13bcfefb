"""Hero Routes - pure helpers for base-path handling and name lookup results.

Invariants:
    - normalize_base_path output always has a leading slash and no trailing slash
    - name_or_none maps only the empty string to None
"""

POWER_STATS_SEGMENT = "powerstats"
JSON_CONTENT_TYPE = "application/json"
DEFAULT_BASE_PATH = "/api/4b3e7de93f96e6c75ce7e09a504a7c6b"


def normalize_base_path(base_path: str) -> str:
    """Return base_path as "/segment[/segment...]" with surrounding whitespace dropped."""
    cleaned = base_path.strip().strip("/")
    if not cleaned:
        raise ValueError("base path must contain at least one segment")
    return f"/{cleaned}"


def name_or_none(name: str) -> str | None:
    """Translate the provider's empty-string sentinel into an explicit None."""
    return name if name != "" else None
