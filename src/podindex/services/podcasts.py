"""Lookups against the PodcastIndex /podcasts endpoint group.

Every method is a single GET. Optional arguments left as None (or `pretty`
left False) are not sent at all.
"""

import logging

from podindex.core.client import APIClient, QueryParameter, Request
from podindex.models.podcast import PodcastArrayResult, PodcastResult

logger = logging.getLogger(__name__)

BASE_PATH = "/podcasts"


class PodcastsService:
    """
    Typed client for the /podcasts endpoints.

    The transport is shared read-only, so one service can serve any number of
    concurrent lookups.
    """

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    async def lookup_by_feed_id(self, id: int, pretty: bool = False) -> PodcastResult:
        """
        Everything the index knows about a feed, by PodcastIndex feed ID.

        Args:
            id: PodcastIndex feed ID
            pretty: Ask for indented JSON (debugging aid, sent without a value)
        """
        return await self._podcast("byfeedid", QueryParameter("id", str(id)), pretty)

    async def lookup_by_feed_url(self, url: str, pretty: bool = False) -> PodcastResult:
        """Everything the index knows about a feed, by feed URL."""
        return await self._podcast("byfeedurl", QueryParameter("url", url), pretty)

    async def lookup_by_guid(self, guid: str, pretty: bool = False) -> PodcastResult:
        """
        Everything the index knows about a feed, by its podcast:guid value.

        The GUID is the global identifier from the podcast namespace
        `<podcast:guid>` tag.
        """
        return await self._podcast("byguid", QueryParameter("guid", guid), pretty)

    async def lookup_by_itunes_id(self, id: int, pretty: bool = False) -> PodcastResult:
        """Everything the index knows about a feed, by iTunes ID."""
        return await self._podcast("byitunesid", QueryParameter("id", str(id)), pretty)

    async def lookup_by_tag(
        self,
        max: int | None = None,
        start_at: str | None = None,
        pretty: bool = False,
    ) -> PodcastArrayResult:
        """
        Feeds that support the podcast:value namespace tag.

        Without `start_at` the top feeds by popularity come back. With it,
        feeds are ordered by feed ID starting at that value; pass the
        result's `next_start_at` to get the following page and stop when no
        feeds are returned.

        Args:
            max: Maximum number of results
            start_at: Feed ID to start at
            pretty: Ask for indented JSON
        """
        return await self._podcasts(
            "bytag",
            QueryParameter("podcast-value"),
            max=max,
            pretty=pretty,
            start_at=start_at,
        )

    async def lookup_by_medium(
        self,
        medium: str,
        max: int | None = None,
        pretty: bool = False,
    ) -> PodcastArrayResult:
        """Feeds marked with the given podcast:medium value (e.g. "music")."""
        return await self._podcasts(
            "bymedium",
            QueryParameter("medium", medium),
            max=max,
            pretty=pretty,
        )

    async def trending_podcasts(
        self,
        max: int | None = None,
        since: int | str | None = None,
        lang: str | None = None,
        cat: str | None = None,
        notcat: str | None = None,
        pretty: bool = False,
    ) -> PodcastArrayResult:
        """
        Feeds that are currently trending.

        Args:
            max: Maximum number of results
            since: Unix epoch timestamp, or a negative number of seconds
                before now. Sent as given.
            lang: Comma-separated language codes; "unknown" includes feeds
                with no language set
            cat: Comma-separated category IDs or names to include
            notcat: Comma-separated category IDs or names to exclude
            pretty: Ask for indented JSON
        """
        query: list[QueryParameter] = []

        if max is not None:
            query.append(QueryParameter("max", str(max)))

        if pretty:
            query.append(QueryParameter("pretty"))

        if since is not None:
            query.append(QueryParameter("since", str(since)))

        if lang is not None:
            query.append(QueryParameter("lang", lang))

        if cat is not None:
            query.append(QueryParameter("cat", cat))

        if notcat is not None:
            query.append(QueryParameter("notcat", notcat))

        request = Request(f"{BASE_PATH}/trending", tuple(query))
        result = await self._api_client.send(request, PodcastArrayResult)
        logger.info(f"Found {len(result.feeds)} trending feeds")
        return result

    async def dead_podcasts(self, pretty: bool = False) -> PodcastArrayResult:
        """
        Feeds marked dead.

        The full list is also published as a CSV at
        https://public.podcastindex.org/podcastindex_dead_feeds.csv
        """
        query: tuple[QueryParameter, ...] = ()
        if pretty:
            query = (QueryParameter("pretty"),)

        request = Request(f"{BASE_PATH}/dead", query)
        result = await self._api_client.send(request, PodcastArrayResult)
        logger.info(f"Found {len(result.feeds)} dead feeds")
        return result

    async def _podcast(self, path: str, q: QueryParameter, pretty: bool) -> PodcastResult:
        """Single required key, returns one feed."""
        query = [q]

        if pretty:
            query.append(QueryParameter("pretty"))

        request = Request(f"{BASE_PATH}/{path}", tuple(query))
        result = await self._api_client.send(request, PodcastResult)
        if result.feed is None:
            logger.info(f"No feed found for {path} {q.name}={q.value}")
        else:
            logger.info(f"Found feed {result.feed.id} for {path}")
        return result

    async def _podcasts(
        self,
        path: str,
        q: QueryParameter,
        max: int | None = None,
        pretty: bool = False,
        start_at: str | None = None,
    ) -> PodcastArrayResult:
        """Required key plus optional max/start_at, returns a list of feeds."""
        query = [q]

        if max is not None:
            query.append(QueryParameter("max", str(max)))

        if pretty:
            query.append(QueryParameter("pretty"))

        if start_at is not None:
            query.append(QueryParameter("start_at", start_at))

        request = Request(f"{BASE_PATH}/{path}", tuple(query))
        result = await self._api_client.send(request, PodcastArrayResult)
        logger.info(f"Found {len(result.feeds)} feeds for {path}")
        return result
