"""
Feed normalizer tests.

Covers field resolution chains (media, kind, image, text, duration),
identifier stability, truncation bounds, the media-required invariant,
and totality over malformed parser output.
"""

import pytest

from podscript.models import RawFeed, RawFeedItem
from podscript.services.feed_normalizer import (
    format_duration,
    infer_kind,
    normalize_feed,
    normalize_item,
    pick_description,
    pick_image_url,
    pick_media,
)
from podscript.utils import normalize_to_https, stable_hash

from .conftest import sample_raw_feed


def item(**fields) -> RawFeedItem:
    return RawFeedItem.model_validate(fields)


class TestFormatDuration:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (45, "0:45"),
            (125, "2:05"),
            (3725, "1:02:05"),
            ("3600", "1:00:00"),
            ("59", "0:59"),
            ("12:34", "12:34"),
            ("01:02:03", "01:02:03"),
            ("", ""),
            (None, ""),
            ("about an hour", "about an hour"),
            ("-30", "-30"),
            (-3700, "-3700"),
            ("1_000", "1_000"),
            ("+90", "+90"),
            (" 90 ", "1:30"),
        ],
    )
    def test_examples(self, value, expected):
        assert format_duration(value) == expected


class TestInferKind:
    def test_video_mime_type(self):
        assert infer_kind("https://x.com/a", "video/mp4") == "video"

    def test_mime_type_is_case_insensitive(self):
        assert infer_kind("https://x.com/a", "Video/MP4") == "video"

    def test_mp3_without_type_is_audio(self):
        assert infer_kind("https://x.com/a.mp3", "") == "audio"

    def test_hls_manifest_is_video(self):
        assert infer_kind("https://x.com/live/master.m3u8?token=1", "") == "video"

    @pytest.mark.parametrize("url", ["https://x.com/a.mp4", "https://x.com/a.WEBM", "https://x.com/a.mov?dl=1"])
    def test_video_containers(self, url):
        assert infer_kind(url, None) == "video"

    def test_video_extension_mid_path_is_audio(self):
        assert infer_kind("https://x.com/a.mp4/stream.mp3", "") == "audio"

    def test_defaults_to_audio(self):
        assert infer_kind(None, None) == "audio"


class TestPickMedia:
    def test_enclosure_wins(self):
        raw = item(
            enclosure={"url": "https://x.com/a.mp3", "type": "audio/mpeg"},
            mediaContent=[{"$": {"url": "https://x.com/a.mp4", "type": "video/mp4"}}],
            link="https://x.com/page",
        )
        assert pick_media(raw) == ("https://x.com/a.mp3", "audio/mpeg")

    def test_attribute_wrapped_media_content(self):
        raw = item(mediaContent=[{"$": {"url": "https://x.com/a.mp4", "type": "video/mp4"}}])
        assert pick_media(raw) == ("https://x.com/a.mp4", "video/mp4")

    def test_flat_media_content(self):
        raw = item(media_content={"url": "https://x.com/a.mp4"})
        assert pick_media(raw) == ("https://x.com/a.mp4", "")

    def test_malformed_entry_does_not_hide_good_one(self):
        raw = item(
            mediaContent=[{"$": {"url": "https://x.com/v.mp4", "type": "video/mp4"}}, "junk", 3],
            mediaThumbnail=[None, {"url": "http://x.com/t.jpg"}],
        )
        assert pick_media(raw) == ("https://x.com/v.mp4", "video/mp4")
        assert pick_image_url(raw, "") == "https://x.com/t.jpg"

    def test_falls_back_to_link_with_empty_type(self):
        raw = item(link="https://x.com/page")
        assert pick_media(raw) == ("https://x.com/page", "")

    def test_nothing_resolvable(self):
        assert pick_media(item(title="x")) == ("", "")

    def test_enclosure_without_url_is_skipped(self):
        raw = item(enclosure={"type": "audio/mpeg"}, link="https://x.com/page")
        assert pick_media(raw) == ("https://x.com/page", "")


class TestPickImageUrl:
    def test_thumbnail_first(self):
        raw = item(
            mediaThumbnail=[{"$": {"url": "http://x.com/thumb.jpg"}}],
            itunesImage={"href": "https://x.com/itunes.jpg"},
        )
        assert pick_image_url(raw, "https://x.com/feed.jpg") == "https://x.com/thumb.jpg"

    @pytest.mark.parametrize(
        "shape",
        [
            "http://x.com/i.jpg",
            {"href": "http://x.com/i.jpg"},
            {"url": "http://x.com/i.jpg"},
            {"$": {"href": "http://x.com/i.jpg"}},
        ],
    )
    def test_itunes_image_shapes(self, shape):
        assert pick_image_url(item(itunesImage=shape), "") == "https://x.com/i.jpg"

    def test_empty_href_falls_through_to_url(self):
        raw = item(itunesImage={"href": "", "url": "https://x.com/u.jpg"})
        assert pick_image_url(raw, "") == "https://x.com/u.jpg"

    def test_unknown_shape_falls_back_to_feed_image(self):
        raw = item(itunesImage={"width": 300})
        assert pick_image_url(raw, "https://x.com/feed.jpg") == "https://x.com/feed.jpg"

    def test_no_image_anywhere(self):
        assert pick_image_url(item(), "") == ""


class TestHttpsNormalization:
    def test_http_upgraded(self):
        assert normalize_to_https("http://x.com/a?b=http://c") == "https://x.com/a?b=http://c"

    @pytest.mark.parametrize("url", ["https://x.com/a", "ftp://x.com/a", "data:image/png;base64,AAA"])
    def test_other_schemes_unchanged(self, url):
        assert normalize_to_https(url) == url

    def test_empty(self):
        assert normalize_to_https(None) == ""


class TestTextFields:
    def test_description_priority(self):
        raw = item(
            contentSnippet="snippet",
            itunesSummary="summary",
            contentEncoded="<p>encoded</p>",
            content="content",
        )
        assert pick_description(raw) == "snippet"
        assert pick_description(item(itunesSummary="summary", content="content")) == "summary"
        assert pick_description(item(contentEncoded="<p>encoded</p>", content="c")) == "encoded"
        assert pick_description(item(content="<i>content</i>")) == "<i>content</i>"

    def test_title_is_stripped_and_collapsed(self):
        raw = item(title="  <b>Big</b>\n\n  News  ", enclosure={"url": "https://x.com/a.mp3"})
        assert normalize_item(raw, 0).title == "Big News"

    def test_title_truncation(self):
        raw = item(title="a" * 250, enclosure={"url": "https://x.com/a.mp3"})
        title = normalize_item(raw, 0).title
        assert len(title) == 203
        assert title.endswith("...")

    def test_description_truncation(self):
        raw = item(content="<p>" + "word " * 200 + "</p>", enclosure={"url": "https://x.com/a.mp3"})
        description = normalize_item(raw, 0).description
        assert len(description) == 503
        assert description.endswith("...")

    def test_text_at_bound_is_untouched(self):
        raw = item(title="b" * 200, enclosure={"url": "https://x.com/a.mp3"})
        assert normalize_item(raw, 0).title == "b" * 200


class TestIdentifiers:
    def test_same_item_same_id(self):
        raw = {"guid": "abc", "enclosure": {"url": "https://x.com/a.mp3"}}
        first = normalize_item(item(**raw), 0)
        second = normalize_item(item(**raw), 5)
        assert first.id == second.id == stable_hash("abc")

    def test_id_falls_back_to_link_then_media_url(self):
        with_link = item(link="https://x.com/page", enclosure={"url": "http://x.com/a.mp3"})
        media_only = item(enclosure={"url": "http://x.com/a.mp3"})
        assert normalize_item(with_link, 0).id == stable_hash("https://x.com/page")
        assert normalize_item(media_only, 0).id == stable_hash("http://x.com/a.mp3")

    def test_hash_is_short_hex(self):
        value = stable_hash("anything")
        assert len(value) == 16
        int(value, 16)


class TestNormalizeFeed:
    def test_end_to_end_two_items(self):
        raw = RawFeed.model_validate({
            "items": [
                {"enclosure": {"url": "http://x.com/a.mp3", "type": "audio/mpeg"}},
                {"title": "nothing to play"},
            ]
        })
        feed = normalize_feed(raw)
        assert len(feed.items) == 1
        episode = feed.items[0]
        assert episode.kind == "audio"
        assert episode.media_url == "https://x.com/a.mp3"
        assert episode.media_type == "audio/mpeg"

    def test_sample_feed(self):
        feed = normalize_feed(sample_raw_feed())
        assert feed.meta.title == "Test Show"
        assert feed.meta.description == "A show about tests"
        assert feed.meta.image == "https://show.example.com/cover.jpg"
        assert feed.meta.author == "Jane Host"

        first, second = feed.items
        assert first.index == 0
        assert first.duration == "1:02:05"
        assert first.description == "First episode"
        assert first.image == "https://show.example.com/cover.jpg"
        assert first.pub_date == "Mon, 01 Jan 2024 12:00:00 GMT"
        assert second.index == 1
        assert second.kind == "video"
        assert second.duration == "2:05"
        assert second.image == "https://cdn.example.com/ep2.jpg"

    def test_limit_applies_before_dropping(self):
        raw = RawFeed.model_validate({
            "items": [
                {"title": "no media"},
                {"enclosure": {"url": "https://x.com/1.mp3"}},
                {"enclosure": {"url": "https://x.com/2.mp3"}},
            ]
        })
        feed = normalize_feed(raw, limit=2)
        assert [ep.media_url for ep in feed.items] == ["https://x.com/1.mp3"]
        assert feed.items[0].index == 1

    def test_count_never_exceeds_limit(self):
        raw = RawFeed.model_validate({
            "items": [{"enclosure": {"url": f"https://x.com/{n}.mp3"}} for n in range(10)]
        })
        assert len(normalize_feed(raw, limit=3).items) == 3
        assert len(normalize_feed(raw, limit=0).items) == 0
        assert len(normalize_feed(raw, limit=50).items) == 10

    def test_meta_defaults(self):
        feed = normalize_feed(RawFeed())
        assert feed.meta.title == "Untitled"
        assert feed.meta.description == ""
        assert feed.meta.image == ""
        assert feed.items == []

    def test_feed_image_from_itunes_shape(self):
        raw = RawFeed.model_validate({"itunesImage": {"$": {"href": "http://x.com/c.jpg"}}})
        assert normalize_feed(raw).meta.image == "https://x.com/c.jpg"

    def test_author_falls_back_to_creator(self):
        assert normalize_feed(RawFeed(creator="Someone")).meta.author == "Someone"

    def test_malformed_fields_are_treated_as_absent(self):
        raw = RawFeed.model_validate({
            "title": 5,
            "image": "not-an-object",
            "items": [
                None,
                "junk",
                {
                    "enclosure": "nonsense",
                    "mediaContent": 7,
                    "itunesImage": [1, 2],
                    "season": 3,
                    "link": "http://x.com/page",
                },
            ],
        })
        feed = normalize_feed(raw)
        assert feed.meta.title == "5"
        assert feed.meta.image == ""
        assert len(feed.items) == 1
        episode = feed.items[0]
        assert episode.media_url == "https://x.com/page"
        assert episode.media_type == ""
        assert episode.season == "3"
        assert episode.image == ""

    def test_item_with_partly_malformed_media_list_is_kept(self):
        raw = RawFeed.model_validate({
            "items": [{"mediaContent": [{"$": {"url": "https://x.com/v.mp4"}}, "junk"]}],
        })
        feed = normalize_feed(raw)
        assert len(feed.items) == 1
        assert feed.items[0].media_url == "https://x.com/v.mp4"
        assert feed.items[0].kind == "video"

    def test_serializes_with_camel_case_keys(self):
        data = normalize_feed(sample_raw_feed()).model_dump(by_alias=True)
        assert set(data) == {"meta", "items"}
        assert {"mediaUrl", "mediaType", "pubDate", "kind", "id", "index"} <= set(data["items"][0])
