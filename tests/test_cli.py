"""Tests for the command-line interface."""

import json

import pytest

from shortlink.cli import ShortLinkCLI, build_parser, run


class TestCLI:
    """Run CLI commands against the in-memory store."""

    async def test_shorten(self, capsys):
        exit_code = await run(["--db-url", "memory://", "shorten", "example.com/cli"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is True
        assert output["created"] is True
        assert output["originalUrl"] == "https://example.com/cli"
        assert len(output["shortCode"]) == 8

    async def test_shorten_invalid(self, capsys):
        exit_code = await run(["--db-url", "memory://", "shorten", "ftp://example.com"])

        assert exit_code == 1
        error = json.loads(capsys.readouterr().err)
        assert error == {"success": False, "error": "Please provide a valid URL"}

    async def test_info_not_found(self, capsys):
        exit_code = await run(["--db-url", "memory://", "info", "doesNotExist"])

        assert exit_code == 1
        assert json.loads(capsys.readouterr().err)["error"] == "URL not found"

    async def test_info_and_list_share_store(self, capsys):
        cli = ShortLinkCLI(db_url="memory://")
        await cli.initialize()
        try:
            await cli.shorten("https://example.com/a")
            code = json.loads(capsys.readouterr().out)["shortCode"]
            await cli.shorten("https://example.com/b")
            capsys.readouterr()

            assert await cli.info(code) == 0
            info = json.loads(capsys.readouterr().out)
            assert info["originalUrl"] == "https://example.com/a"
            assert info["clicks"] == 0

            assert await cli.list_urls(limit=1) == 0
            listing = json.loads(capsys.readouterr().out)
            assert listing["totalUrls"] == 2
            assert len(listing["urls"]) == 1
            assert listing["urls"][0]["originalUrl"] == "https://example.com/b"
        finally:
            await cli.cleanup()

    async def test_health(self, capsys):
        exit_code = await run(["--db-url", "memory://", "health"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["database"] == "healthy"

    async def test_no_command(self, capsys):
        assert await run([]) == 1

    @pytest.mark.parametrize("limit", ["0", "-1", "ten"])
    def test_list_rejects_bad_limit(self, limit, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["list", "--limit", limit])

        assert exc_info.value.code == 2
        assert "--limit" in capsys.readouterr().err

    def test_list_accepts_positive_limit(self):
        assert build_parser().parse_args(["list", "--limit", "3"]).limit == 3
