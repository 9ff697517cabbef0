"""Pydantic models for API payloads."""

from podindex.models.podcast import Podcast, PodcastArrayResult, PodcastResult

__all__ = ["Podcast", "PodcastResult", "PodcastArrayResult"]
