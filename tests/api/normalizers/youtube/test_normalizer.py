"""Testes do pipeline YouTube (fonte -> busca -> normalização)."""

from __future__ import annotations

import logging

import pytest

from api.normalizers.youtube import (
    extract_channel_info,
    extract_community_posts,
    extract_grid_video_renderers,
    extract_player_info,
    extract_reel_item_renderers,
    transform_initial_data,
)
from app.constants.youtube import AttachmentType, VideoRendererStatus
from config.settings.youtube import YouTubeSettings
from tests.fakes.youtube_payloads import (
    CHANNEL_ID,
    backstage_post,
    community_tab,
    grid_video,
    html_page,
    image_attachment,
    player_response,
    poll_attachment,
    reel_item,
    shared_post,
    video_attachment,
)
from utils.errors import NoPayloadError, UnrecognizedRendererError


def _community_page_data() -> dict:
    return community_tab(
        {"backstagePostRenderer": backstage_post("p1", "Bom dia")},
        {
            "sharedPostRenderer": shared_post(
                "p2", "🤣", backstage_post("p0", "Original", attachment=image_attachment())
            )
        },
        {"backstagePostRenderer": backstage_post("p3", attachment=poll_attachment(("a", True)))},
        {"backstagePostRenderer": backstage_post("p4", attachment=video_attachment())},
    )


class TestExtractCommunityPosts:
    """Testes para extract_community_posts."""

    def test_from_tree(self) -> None:
        posts = extract_community_posts(_community_page_data())
        assert [post.id for post in posts] == ["p1", "p2", "p3", "p4"]
        assert [post.attachment_type for post in posts] == [
            AttachmentType.NONE,
            AttachmentType.SHARED_POST,
            AttachmentType.POLL,
            AttachmentType.VIDEO,
        ]

    def test_from_html_page(self) -> None:
        page = html_page(ytInitialData=_community_page_data())
        posts = extract_community_posts(page)
        assert len(posts) == 4
        assert posts == extract_community_posts(_community_page_data())

    def test_shared_post_yields_single_result(self) -> None:
        data = community_tab(
            {
                "sharedPostRenderer": shared_post(
                    "quote", "🤣", backstage_post("orig", "Outro texto", attachment=image_attachment())
                )
            }
        )
        posts = extract_community_posts(data)
        assert len(posts) == 1
        [post] = posts
        assert post.text == "🤣"
        assert post.images is None
        assert post.shared_post is not None
        assert post.shared_post.images is not None
        assert len(post.shared_post.images) == 1

    def test_only_active_tab_is_searched(self) -> None:
        posts = extract_community_posts(_community_page_data())
        assert "home-tab" not in {post.id for post in posts}

    def test_tree_without_tabs_is_searched_whole(self) -> None:
        data = {"items": [{"backstagePostRenderer": backstage_post("solo", "x")}]}
        assert [post.id for post in extract_community_posts(data)] == ["solo"]

    def test_fail_fast_by_default(self) -> None:
        data = community_tab(
            {"backstagePostRenderer": backstage_post("ok", "x")},
            {"backstagePostRenderer": backstage_post("bad", attachment={"quizRenderer": {}})},
        )
        with pytest.raises(UnrecognizedRendererError):
            extract_community_posts(data, settings=YouTubeSettings())

    def test_skip_invalid_drops_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        data = community_tab(
            {"backstagePostRenderer": backstage_post("ok", "x")},
            {"backstagePostRenderer": backstage_post("bad", attachment={"quizRenderer": {}})},
            {"backstagePostRenderer": backstage_post("ok2", "y")},
        )
        with caplog.at_level(logging.WARNING):
            posts = extract_community_posts(data, skip_invalid=True)
        assert [post.id for post in posts] == ["ok", "ok2"]
        fallback_records = [r for r in caplog.records if getattr(r, "fallback_used", False)]
        assert len(fallback_records) == 1
        assert fallback_records[0].error_type == "UnrecognizedRendererError"
        assert fallback_records[0].renderer == "backstageAttachment"

    def test_skip_invalid_from_settings(self) -> None:
        data = community_tab(
            {"backstagePostRenderer": backstage_post("bad", attachment={"quizRenderer": {}})},
        )
        settings = YouTubeSettings(skip_invalid_renderers=True)
        assert extract_community_posts(data, settings=settings) == []

    def test_page_without_initial_data_raises_no_payload(self) -> None:
        page = html_page(ytInitialPlayerResponse=player_response())
        with pytest.raises(NoPayloadError) as exc_info:
            extract_community_posts(page)
        assert exc_info.value.variable == "ytInitialData"

    def test_empty_string_raises_no_payload(self) -> None:
        with pytest.raises(NoPayloadError):
            extract_community_posts("")

    def test_invalid_source_type_raises(self) -> None:
        with pytest.raises(TypeError):
            extract_community_posts(42)  # type: ignore[arg-type]


class TestExtractVideoListings:
    """Testes para grid e shorts."""

    def test_grid_videos_in_order(self) -> None:
        data = {
            "contents": [
                grid_video("v1", "Um", "DEFAULT"),
                {"wrapper": grid_video("v2", "Dois", "UPCOMING")},
                grid_video("v3", "Três", "LIVE"),
                reel_item("s1", "Short"),
            ]
        }
        videos = extract_grid_video_renderers(data)
        assert [video.id for video in videos] == ["v1", "v2", "v3"]
        assert [video.status for video in videos] == [
            VideoRendererStatus.OFFLINE,
            VideoRendererStatus.UPCOMING,
            VideoRendererStatus.LIVE,
        ]

    def test_reels_only(self) -> None:
        data = {"contents": [grid_video("v1", "Um", "LIVE"), reel_item("s1", "Short")]}
        videos = extract_reel_item_renderers(html_page(ytInitialData=data))
        assert [(video.id, video.status) for video in videos] == [("s1", VideoRendererStatus.OFFLINE)]


class TestExtractChannelAndPlayer:
    """Testes para extract_channel_info e extract_player_info."""

    def test_channel_info_from_page(self) -> None:
        page = html_page(ytInitialData=community_tab())
        info = extract_channel_info(page)
        assert info.id == CHANNEL_ID
        assert info.vanity_id is None

    def test_player_info_from_page(self) -> None:
        page = html_page(ytInitialData={"x": 1}, ytInitialPlayerResponse=player_response())
        info = extract_player_info(page)
        assert info.video_id == "EIGTwGXzEb0"
        assert info.has_ended is True

    def test_player_info_missing(self) -> None:
        page = html_page(ytInitialData={"x": 1})
        with pytest.raises(NoPayloadError) as exc_info:
            extract_player_info(page)
        assert exc_info.value.variable == "ytInitialPlayerResponse"


class TestTransformInitialData:
    """Testes para o pipeline genérico."""

    def test_custom_normalizer_and_scope(self) -> None:
        data = {"keep": {"k": {"v": 1}}, "drop": {"k": {"v": 2}}}
        result = transform_initial_data(
            data,
            ("k",),
            lambda raw: raw["v"] * 10,
            scope=lambda tree: tree["keep"],
        )
        assert result == [10]

    def test_non_renderer_errors_propagate_even_when_skipping(self) -> None:
        def broken(raw: dict) -> int:
            raise KeyError("bug")

        with pytest.raises(KeyError):
            transform_initial_data({"k": {}}, ("k",), broken, skip_invalid=True)
