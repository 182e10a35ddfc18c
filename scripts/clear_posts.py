#!/usr/bin/env python3
"""Delete every post, with its comments and replies, from the database.

Users are kept. Intended for resetting development and staging data.
"""

import argparse
import asyncio
import sys

import logfire

from board.config import Settings
from board.domain.service import PostService
from board.util.di.container import create_container
from board.util.observability import configure_logfire


async def clear_posts() -> int:
    """Delete all posts inside one request scope (one transaction)."""
    container = create_container()
    try:
        async with container() as request_container:
            post_service = await request_container.get(PostService)
            return await post_service.clear_posts()
    finally:
        await container.close()


def main() -> int:
    """Clear posts and log the outcome to Logfire."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--yes", action="store_true", help="Do not ask for confirmation"
    )
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    if settings.environment == "production" and not args.yes:
        print("Refusing to clear posts in production without --yes")
        return 1

    if not args.yes:
        answer = input(f"Delete ALL posts from {settings.database_url}? [y/N] ")
        if answer.strip().lower() != "y":
            print("Aborted")
            return 1

    try:
        deleted = asyncio.run(clear_posts())
    except Exception as e:
        logfire.error(
            "Clearing posts failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    print(f"Deleted {deleted} posts")
    return 0


if __name__ == "__main__":
    sys.exit(main())
