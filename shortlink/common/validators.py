"""Validation utilities for short links."""

import ipaddress
import re
from urllib.parse import urlparse
from typing import Tuple


MAX_URL_LENGTH = 2048

ALLOWED_SCHEMES = ("http", "https")

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*)://")
_LABEL_RE = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")
_SHORT_CODE_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def normalize_url(url: str) -> str:
    """Turn user input into a canonical absolute URL.

    Input without a scheme gets ``https://`` prepended. An http/https scheme
    is lowercased. Any other explicit scheme is left alone so that
    validation rejects it instead of it being buried in the host part.

    Args:
        url: Raw user input

    Returns:
        Normalized URL string (not yet validated)
    """
    url = url.strip()

    match = _SCHEME_RE.match(url)
    if match:
        scheme = match.group(1).lower()
        if scheme in ALLOWED_SCHEMES:
            return scheme + url[len(match.group(1)):]
        return url

    return f"https://{url}"


def _is_valid_host(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
        return True
    except ValueError:
        pass

    try:
        ascii_host = hostname.encode("idna").decode("ascii")
    except UnicodeError:
        return False

    labels = ascii_host.rstrip(".").split(".")
    return all(_LABEL_RE.match(label) for label in labels)


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a normalized URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    if not url.startswith(("http://", "https://")):
        return False, "URL must use http or https protocol"

    try:
        result = urlparse(url)
        hostname = result.hostname
        # Raises ValueError for non-numeric or out-of-range ports
        result.port
    except ValueError as e:
        return False, f"Invalid URL format: {e}"

    if result.scheme not in ALLOWED_SCHEMES:
        return False, "URL must use http or https protocol"

    if not hostname:
        return False, "URL must have a valid domain"

    if not _is_valid_host(hostname):
        return False, f"Invalid host: {hostname}"

    return True, ""


def is_valid_short_code(short_code: str, min_length: int = 1, max_length: int = 64) -> Tuple[bool, str]:
    """Validate the format of a short code taken from a request path.

    Args:
        short_code: The short code to validate
        min_length: Minimum length for short code
        max_length: Maximum length for short code

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"

    if len(short_code) < min_length:
        return False, f"Short code must be at least {min_length} characters"

    if len(short_code) > max_length:
        return False, f"Short code must be at most {max_length} characters"

    if not _SHORT_CODE_RE.match(short_code):
        return False, "Short code can only contain letters, numbers, hyphens, and underscores"

    return True, ""
