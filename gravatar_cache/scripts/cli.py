"""CLI tool for gravatar-cache."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path

from gravatar_cache.config import AvatarConfig
from gravatar_cache.logging_config import configure_logging
from gravatar_cache.resolver import AvatarResolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve an email address to a (cached) gravatar."
    )
    parser.add_argument("email", help="Email address")
    parser.add_argument("--size", type=int, help="Image size in pixels")
    parser.add_argument("--rating", help="Maximum rating (g, pg, r, x)")
    parser.add_argument("--default", help="Fallback image style, e.g. identicon")
    parser.add_argument(
        "--cache-dir", type=Path, help="Enable caching in this directory"
    )
    parser.add_argument("--base-url", help="Gravatar service base URL")
    parser.add_argument("--json", action="store_true", help="Print a JSON result")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(debug=args.debug)

    config = AvatarConfig.from_env()
    if args.base_url:
        config.base_url = args.base_url

    with AvatarResolver(config) as resolver:
        if args.cache_dir:
            resolver.configure(args.cache_dir)
        result = resolver.resolve_result(
            args.email, args.size, args.rating, args.default
        )

    if args.json:
        payload = {
            "url": result.url,
            "locator": result.locator,
            "local_path": str(result.local_path) if result.local_path else None,
            "status": result.status.value,
        }
        print(json.dumps(payload, indent=2))
    else:
        print(result.locator)


if __name__ == "__main__":
    main()
