#!/usr/bin/env python3
"""
CLI for ad-hoc PodcastIndex podcast lookups.

Usage:
    uv run python scripts/lookup_podcast.py feed-id 920666
    uv run python scripts/lookup_podcast.py trending --max 10 --lang en
    uv run python scripts/lookup_podcast.py tag --max 20 --start-at 100 --json

Credentials come from PODCASTINDEX_API_KEY / PODCASTINDEX_API_SECRET.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from podindex.core.client import APIClient
from podindex.models.podcast import Podcast, PodcastArrayResult, PodcastResult
from podindex.services.podcasts import PodcastsService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up podcasts on PodcastIndex")
    parser.add_argument("--pretty", action="store_true", help="Request pretty-printed JSON from the API")
    parser.add_argument("--json", action="store_true", help="Output raw JSON instead of formatted text")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("feed-id", help="Look up by PodcastIndex feed ID").add_argument("id", type=int)
    sub.add_parser("feed-url", help="Look up by feed URL").add_argument("url")
    sub.add_parser("guid", help="Look up by podcast:guid").add_argument("guid")
    sub.add_parser("itunes-id", help="Look up by iTunes ID").add_argument("id", type=int)

    tag = sub.add_parser("tag", help="Feeds supporting the podcast:value tag")
    tag.add_argument("--max", type=int)
    tag.add_argument("--start-at")

    medium = sub.add_parser("medium", help="Feeds with a given podcast:medium")
    medium.add_argument("medium")
    medium.add_argument("--max", type=int)

    trending = sub.add_parser("trending", help="Trending feeds")
    trending.add_argument("--max", type=int)
    trending.add_argument("--since", help="Epoch timestamp or negative seconds before now")
    trending.add_argument("--lang")
    trending.add_argument("--cat")
    trending.add_argument("--notcat")

    sub.add_parser("dead", help="Feeds marked dead")

    return parser


async def run(service: PodcastsService, args: argparse.Namespace) -> PodcastResult | PodcastArrayResult:
    """Dispatch parsed arguments to the matching lookup."""
    if args.command == "feed-id":
        return await service.lookup_by_feed_id(args.id, pretty=args.pretty)
    if args.command == "feed-url":
        return await service.lookup_by_feed_url(args.url, pretty=args.pretty)
    if args.command == "guid":
        return await service.lookup_by_guid(args.guid, pretty=args.pretty)
    if args.command == "itunes-id":
        return await service.lookup_by_itunes_id(args.id, pretty=args.pretty)
    if args.command == "tag":
        return await service.lookup_by_tag(max=args.max, start_at=args.start_at, pretty=args.pretty)
    if args.command == "medium":
        return await service.lookup_by_medium(args.medium, max=args.max, pretty=args.pretty)
    if args.command == "trending":
        return await service.trending_podcasts(
            max=args.max,
            since=args.since,
            lang=args.lang,
            cat=args.cat,
            notcat=args.notcat,
            pretty=args.pretty,
        )
    return await service.dead_podcasts(pretty=args.pretty)


def print_feed(feed: Podcast):
    print(f"[{feed.id}] {feed.title}")
    if feed.author:
        print(f"    by {feed.author}")
    if feed.url:
        print(f"    {feed.url}")


def print_formatted_result(result: PodcastResult | PodcastArrayResult):
    """Pretty print a lookup result."""
    print(f"\n{result.description}")
    print("-" * 40)

    if isinstance(result, PodcastResult):
        if result.feed is None:
            print("No matching feed")
        else:
            print_feed(result.feed)
        return

    for feed in result.feeds:
        print_feed(feed)
    print(f"\n{result.count} feeds")
    if result.next_start_at is not None:
        print(f"Next page: --start-at {result.next_start_at}")


async def main():
    args = build_parser().parse_args()

    async with APIClient() as client:
        service = PodcastsService(client)
        try:
            result = await run(service, args)
        except Exception as e:
            logging.exception("Lookup failed")
            print(f"\nError: {e}")
            sys.exit(1)

    if args.json:
        print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    else:
        print_formatted_result(result)


if __name__ == "__main__":
    asyncio.run(main())
