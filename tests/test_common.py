"""Tests for common utilities."""

import json

import pytest

from shortlink.common.logging_config import setup_logging
from shortlink.common.url_builder import build_short_url, route_prefix
from shortlink.common.validators import is_valid_short_code, is_valid_url, normalize_url


class TestNormalizeURL:
    """Test URL normalization."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("example.com/x", "https://example.com/x"),
            ("https://example.com/x", "https://example.com/x"),
            ("http://example.com", "http://example.com"),
            ("  example.com  ", "https://example.com"),
            ("HTTPS://Example.com/Path", "https://Example.com/Path"),
            ("ftp://example.com", "ftp://example.com"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_url(raw) == expected

    def test_normalize_is_idempotent(self):
        once = normalize_url("example.com/a?b=c")
        assert normalize_url(once) == once


class TestValidators:
    """Test validation utilities."""

    def test_valid_urls(self):
        """Test valid URL validation."""
        for url in [
            "https://example.com",
            "http://example.com/path",
            "https://sub.example.com:8080/path?query=value#frag",
            "http://localhost:3000",
            "http://127.0.0.1/admin",
            "http://[::1]:8080/",
            "https://bücher.example/",
        ]:
            valid, error = is_valid_url(url)
            assert valid, f"{url}: {error}"

    def test_invalid_urls(self):
        """Test invalid URL validation."""
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_url("ftp://example.com")
        assert not valid
        assert "http" in error.lower()

        for url in [
            "https://not a url",
            "https://",
            "https://exa_mple.com",
            "https://-example.com",
            "https://example..com",
            "https://example.com:99999/",
            "https://example.com:port/",
            "https://" + "a" * 2100 + ".com",
        ]:
            valid, _ = is_valid_url(url)
            assert not valid, url

    def test_valid_short_codes(self):
        """Test valid short code validation."""
        for code in ["abc123", "test-code", "test_code", "Ab3_x-9Q"]:
            valid, _ = is_valid_short_code(code)
            assert valid

    def test_invalid_short_codes(self):
        """Test invalid short code validation."""
        valid, error = is_valid_short_code("")
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_short_code("a" * 65)
        assert not valid
        assert "at most" in error.lower()

        valid, error = is_valid_short_code("favicon.ico")
        assert not valid

        valid, error = is_valid_short_code("abc@123")
        assert not valid


class TestURLBuilder:
    """Test URL building utilities."""

    def test_build_short_url_no_prefix(self):
        url = build_short_url(
            short_code="abc123",
            base_url="https://example.com/",
            path_prefix=""
        )

        assert url == "https://example.com/abc123"

    def test_build_short_url_with_prefix(self):
        url = build_short_url(
            short_code="abc123",
            base_url="https://example.com",
            path_prefix="/s/"
        )

        assert url == "https://example.com/s/abc123"

    @pytest.mark.parametrize(
        "prefix, expected",
        [("", ""), ("/", ""), ("s", "/s"), ("/s/", "/s"), ("/go//to/", "/go/to")],
    )
    def test_route_prefix(self, prefix, expected):
        assert route_prefix(prefix) == expected


class TestLoggingSetup:
    """Test logging configuration."""

    def test_json_lines_escape_quotes(self, tmp_path):
        log_file = tmp_path / "shortlink.log"
        logger = setup_logging(level="INFO", log_file=str(log_file), json_format=True)
        try:
            url = "example.com/it's"
            logger.getChild("registry").info(f"Rejected URL {url!r}: bad")
            try:
                raise ValueError('bad "value"')
            except ValueError:
                logger.exception("Lookup failed")
        finally:
            for handler in logger.handlers:
                handler.close()
            setup_logging(level="DEBUG")

        lines = log_file.read_text().splitlines()
        assert len(lines) == 2

        first = json.loads(lines[0])
        assert first["message"] == "Rejected URL \"example.com/it's\": bad"
        assert first["logger"] == "shortlink.registry"
        assert first["level"] == "INFO"

        second = json.loads(lines[1])
        assert second["level"] == "ERROR"
        assert 'ValueError: bad "value"' in second["exception"]

    def test_plain_format(self, tmp_path):
        log_file = tmp_path / "plain.log"
        logger = setup_logging(level="WARNING", log_file=str(log_file))
        try:
            logger.info("hidden")
            logger.warning("shown")
        finally:
            for handler in logger.handlers:
                handler.close()
            setup_logging(level="DEBUG")

        content = log_file.read_text()
        assert "hidden" not in content
        assert "[WARNING] shortlink - shown" in content
