"""Async client for the PodcastIndex podcasts API."""

from podindex.core.client import APIClient, QueryParameter, Request
from podindex.core.config import Settings, get_settings
from podindex.models import Podcast, PodcastArrayResult, PodcastResult
from podindex.services import PodcastsService

__all__ = [
    "APIClient",
    "QueryParameter",
    "Request",
    "Settings",
    "get_settings",
    "Podcast",
    "PodcastResult",
    "PodcastArrayResult",
    "PodcastsService",
]
