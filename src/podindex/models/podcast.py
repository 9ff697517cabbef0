"""Pydantic models for the PodcastIndex /podcasts endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Podcast(APIModel):
    """Everything the index knows about one feed."""

    id: int | None = None
    podcast_guid: str | None = None
    title: str | None = None
    url: str | None = None
    original_url: str | None = None
    link: str | None = None
    description: str | None = None
    author: str | None = None
    owner_name: str | None = None
    image: str | None = None
    artwork: str | None = None
    last_update_time: int | None = None
    last_crawl_time: int | None = None
    last_parse_time: int | None = None
    last_good_http_status_time: int | None = None
    last_http_status: int | None = None
    content_type: str | None = None
    itunes_id: int | None = None
    generator: str | None = None
    language: str | None = None
    explicit: bool | None = None
    type: int | None = None  # 0 = RSS, 1 = Atom
    medium: str | None = None
    dead: int | None = None
    episode_count: int | None = None
    crawl_errors: int | None = None
    parse_errors: int | None = None
    categories: dict[str, str] | None = None
    locked: int | None = None
    image_url_hash: int | None = None
    newest_item_pubdate: int | None = None
    newest_item_publish_time: int | None = None
    trend_score: int | None = None
    value: dict[str, Any] | None = None
    funding: dict[str, Any] | None = None

    @field_validator("categories", "value", "funding", mode="before")
    @classmethod
    def _empty_list_as_none(cls, v: Any) -> Any:
        # PHP-encoded empty objects arrive as []
        if v == []:
            return None
        return v


class PodcastResult(APIModel):
    """Single-feed response envelope."""

    status: str | bool | None = None
    description: str | None = None
    query: Any = None
    feed: Podcast | None = None

    @field_validator("feed", mode="before")
    @classmethod
    def _no_match_as_none(cls, v: Any) -> Any:
        # Lookups that match nothing return "feed": []
        if v == []:
            return None
        return v


class PodcastArrayResult(APIModel):
    """Multi-feed response envelope."""

    status: str | bool | None = None
    description: str | None = None
    count: int = 0
    query: Any = None
    max: int | str | None = None
    since: int | str | None = None
    feeds: list[Podcast] = Field(default_factory=list)
    next_start_at: int | str | None = None
