"""Tests for response model decoding."""

from podindex.models.podcast import Podcast, PodcastArrayResult, PodcastResult


class TestPodcastResult:
    """Tests for the single-feed envelope."""

    def test_decodes_feed(self, feed_payload):
        result = PodcastResult.model_validate(feed_payload)

        assert result.status == "true"
        assert result.description == "Found matching feed"
        assert result.feed.podcast_guid == "917393e3-1b1e-5cef-ace4-edaa54e1f810"
        assert result.feed.itunes_id == 1584274529
        assert result.feed.last_good_http_status_time == 1706288700
        assert result.feed.categories == {"9": "Business", "102": "Technology"}
        assert result.feed.value["model"]["type"] == "lightning"
        assert result.feed.explicit is False

    def test_no_match_is_none(self):
        """The API answers an unknown ID with an empty feed list."""
        result = PodcastResult.model_validate(
            {"status": "true", "query": {"id": "0"}, "feed": [], "description": "No feeds match this id."}
        )

        assert result.feed is None

    def test_unknown_fields_ignored(self):
        result = PodcastResult.model_validate({"status": "true", "feed": {"id": 1, "somethingNew": 42}})

        assert result.feed.id == 1
        assert not hasattr(result.feed, "somethingNew")


class TestPodcastArrayResult:
    """Tests for the multi-feed envelope."""

    def test_decodes_feeds_and_token(self, feeds_payload):
        result = PodcastArrayResult.model_validate(feeds_payload)

        assert result.count == 2
        assert [feed.id for feed in result.feeds] == [920666, 41504]
        assert result.next_start_at == 41505
        assert result.max == "2"

    def test_missing_token_is_none(self):
        result = PodcastArrayResult.model_validate({"status": "true", "feeds": [], "count": 0})

        assert result.feeds == []
        assert result.next_start_at is None


class TestPodcast:
    """Tests for the feed model itself."""

    def test_empty_categories_as_none(self):
        """Empty objects encoded as [] decode to None."""
        feed = Podcast.model_validate({"id": 1, "categories": [], "funding": []})

        assert feed.categories is None
        assert feed.funding is None

    def test_snake_case_construction(self):
        feed = Podcast(id=5, episode_count=10)

        assert feed.model_dump(by_alias=True, exclude_none=True) == {"id": 5, "episodeCount": 10}
