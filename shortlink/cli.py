"""
Command-line interface for the short link service.

Usage:
    shortlink-cli shorten <url>
    shortlink-cli info <short_code>
    shortlink-cli list [--limit N]
    shortlink-cli health
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from .app import Components, build_components
from .common.logging_config import setup_logging
from .config import load_config
from .errors import NotFoundError, ShortLinkError, ValidationError


class ShortLinkCLI:
    """Command-line interface for the short link service."""

    def __init__(self, db_url: Optional[str] = None, redis_url: Optional[str] = None, verbose: bool = False):
        """Initialize CLI."""
        overrides = {}
        if db_url:
            overrides["database_url"] = db_url
        if redis_url:
            overrides["redis_url"] = redis_url
        self.config = load_config(**overrides)
        self.logger = setup_logging(level="DEBUG" if verbose else "ERROR")
        self.components: Optional[Components] = None

    async def initialize(self):
        """Initialize store and services."""
        self.components = await build_components(self.config, self.logger)

    async def cleanup(self):
        """Cleanup resources."""
        if self.components:
            await self.components.close()

    def _print(self, payload: dict, error: bool = False) -> int:
        print(json.dumps(payload, indent=2), file=sys.stderr if error else sys.stdout)
        return 1 if error else 0

    async def shorten(self, url: str) -> int:
        """Shorten a URL."""
        try:
            result = await self.components.registry.shorten(url)
        except ValidationError as e:
            return self._print({"success": False, "error": e.message}, error=True)
        except ShortLinkError as e:
            return self._print({"success": False, "error": f"Error: {e.message}"}, error=True)

        return self._print({
            "success": True,
            "created": result.created,
            **result.to_dict(),
        })

    async def info(self, short_code: str) -> int:
        """Show a link without counting a click."""
        try:
            link = await self.components.registry.get(short_code)
        except (ValidationError, NotFoundError) as e:
            return self._print({"success": False, "error": e.message}, error=True)
        except ShortLinkError as e:
            return self._print({"success": False, "error": f"Error: {e.message}"}, error=True)

        return self._print({"success": True, **link.to_dict()})

    async def list_urls(self, limit: Optional[int] = None) -> int:
        """List links, newest first, with totals."""
        try:
            listing = await self.components.registry.list_all()
        except ShortLinkError as e:
            return self._print({"success": False, "error": f"Error: {e.message}"}, error=True)

        data = listing.to_dict()
        if limit is not None:
            data["urls"] = data["urls"][:limit]
        return self._print({"success": True, **data})

    async def health(self) -> int:
        """Check store health."""
        healthy = await self.components.store.health_check()
        return self._print({"success": healthy, "database": "healthy" if healthy else "unhealthy"}, error=not healthy)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortlink-cli",
        description="Short link service CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Show a link and its click count
  %(prog)s info Ab3_x-9Q

  # List links
  %(prog)s list --limit 10
        """
    )

    parser.add_argument(
        "--db-url",
        help="Store connection URL (default: DATABASE_URL from the environment)"
    )
    parser.add_argument(
        "--redis-url",
        help="Redis connection URL (default: REDIS_URL from the environment)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    info_parser = subparsers.add_parser("info", help="Show a link and its clicks")
    info_parser.add_argument("short_code", help="Short code to look up")

    list_parser = subparsers.add_parser("list", help="List links, newest first")
    list_parser.add_argument("--limit", type=positive_int, default=None, help="Maximum number to show")

    subparsers.add_parser("health", help="Check store health")

    return parser


async def run(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = ShortLinkCLI(db_url=args.db_url, redis_url=args.redis_url, verbose=args.verbose)

    try:
        await cli.initialize()

        if args.command == "shorten":
            return await cli.shorten(args.url)
        elif args.command == "info":
            return await cli.info(args.short_code)
        elif args.command == "list":
            return await cli.list_urls(args.limit)
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1
    finally:
        await cli.cleanup()


def main(argv: Optional[List[str]] = None) -> int:
    """Console script entry point."""
    return asyncio.run(run(argv))


if __name__ == "__main__":
    sys.exit(main())
