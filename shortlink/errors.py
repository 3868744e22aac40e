"""Exception types raised by the link registry and redirect service."""


class ShortLinkError(Exception):
    """Base error for the short link service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ShortLinkError, ValueError):
    """Input URL or short code is missing or malformed."""


class NotFoundError(ShortLinkError, LookupError):
    """No link exists for the requested short code."""


class StoreError(ShortLinkError):
    """The underlying link store failed."""


class DuplicateShortCodeError(StoreError):
    """An insert was rejected because the short code is already taken."""

    def __init__(self, short_code: str):
        super().__init__(f"Short code '{short_code}' already exists")
        self.short_code = short_code
