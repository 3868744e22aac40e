"""Short code generation utilities."""

import secrets
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs."""

    # URL-safe alphabet (RFC 3986 unreserved characters minus '.' and '~')
    URL_SAFE_CHARS = string.ascii_letters + string.digits + "_-"

    def __init__(self, default_length: int = 8, alphabet: Optional[str] = None):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            alphabet: Characters to draw from (defaults to URL_SAFE_CHARS)

        Raises:
            ValueError: If the alphabet is not URL-safe or too small
        """
        alphabet = alphabet or self.URL_SAFE_CHARS
        if len(set(alphabet)) < 2:
            raise ValueError("Alphabet must contain at least two distinct characters")
        if not self.is_valid_format(alphabet):
            raise ValueError("Alphabet must only contain URL-safe characters")
        if default_length < 1:
            raise ValueError("Short code length must be positive")

        # Duplicates would skew the distribution
        self.alphabet = "".join(dict.fromkeys(alphabet))
        self.default_length = default_length

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Uses the ``secrets`` CSPRNG so codes are not guessable from
        previously issued ones.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return "".join(secrets.choice(self.alphabet) for _ in range(length))

    def keyspace_size(self, length: Optional[int] = None) -> int:
        """Number of distinct codes of the given length."""
        return len(self.alphabet) ** (length or self.default_length)

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code only uses URL-safe characters.

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        return bool(code) and all(c in ShortCodeGenerator.URL_SAFE_CHARS for c in code)
