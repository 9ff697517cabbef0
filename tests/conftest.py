"""Shared fixtures for PodcastIndex client tests."""

import pytest

from podindex.core.config import Settings

BASE_URL = "https://api.podcastindex.org/api/1.0"


@pytest.fixture
def settings():
    """Settings with dummy credentials, ignoring any local .env."""
    return Settings(
        api_key="test-key",
        api_secret="test-secret",
        user_agent="podindex-tests/1.0",
        base_url=BASE_URL,
        _env_file=None,
    )


@pytest.fixture
def feed_payload():
    """A trimmed /podcasts/byfeedid response for Podcasting 2.0."""
    return {
        "status": "true",
        "query": {"id": "920666"},
        "feed": {
            "id": 920666,
            "podcastGuid": "917393e3-1b1e-5cef-ace4-edaa54e1f810",
            "title": "Podcasting 2.0",
            "url": "https://mp3s.nashownotes.com/pc20rss.xml",
            "originalUrl": "http://mp3s.nashownotes.com/pc20rss.xml",
            "link": "https://podcastindex.org/",
            "description": "The Podcast Index presents Podcasting 2.0",
            "author": "Podcast Index LLC",
            "ownerName": "Podcast Index LLC",
            "image": "https://noagendaassets.com/enc/pc20.png",
            "artwork": "https://noagendaassets.com/enc/pc20.png",
            "lastUpdateTime": 1706288923,
            "lastCrawlTime": 1706288700,
            "lastParseTime": 1706288925,
            "lastGoodHttpStatusTime": 1706288700,
            "lastHttpStatus": 200,
            "contentType": "application/rss+xml",
            "itunesId": 1584274529,
            "generator": None,
            "language": "en",
            "explicit": False,
            "type": 0,
            "medium": "podcast",
            "dead": 0,
            "episodeCount": 163,
            "crawlErrors": 0,
            "parseErrors": 0,
            "categories": {"9": "Business", "102": "Technology"},
            "locked": 0,
            "imageUrlHash": 1702747127,
            "newestItemPubdate": 1706288400,
            "value": {
                "model": {"type": "lightning", "method": "keysend", "suggested": "0.00000005000"},
                "destinations": [],
            },
            "funding": {"url": "https://podcastindex.org/", "message": "Support the index"},
        },
        "description": "Found matching feed",
    }


@pytest.fixture
def feeds_payload():
    """A trimmed /podcasts/bytag response with a continuation token."""
    return {
        "status": "true",
        "feeds": [
            {"id": 920666, "title": "Podcasting 2.0", "url": "https://mp3s.nashownotes.com/pc20rss.xml"},
            {"id": 41504, "title": "No Agenda", "url": "http://feed.nashownotes.com/rss.xml"},
        ],
        "count": 2,
        "max": "2",
        "nextStartAt": 41505,
        "description": "Found matching feeds",
    }
