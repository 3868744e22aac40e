"""Short URL composition.

The redirect routes are mounted under ``route_prefix(path_prefix)``, so the
URLs built here always resolve against the running app.
"""


def route_prefix(path_prefix: str) -> str:
    """Normalize a configured prefix to the router form: "" or "/segment"."""
    segments = [part for part in path_prefix.split("/") if part]
    return "/" + "/".join(segments) if segments else ""


def build_short_url(short_code: str, base_url: str, path_prefix: str = "") -> str:
    """Join base URL, optional prefix and code.

    >>> build_short_url("Ab3_x-9Q", "https://sho.rt/", "/s/")
    'https://sho.rt/s/Ab3_x-9Q'
    """
    return f"{base_url.rstrip('/')}{route_prefix(path_prefix)}/{short_code}"
