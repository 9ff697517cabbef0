"""API services."""

from podindex.services.podcasts import PodcastsService

__all__ = ["PodcastsService"]
