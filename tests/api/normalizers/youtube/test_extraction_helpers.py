"""Testes dos helpers de extração (runs, links, thumbnails, datas)."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from api.normalizers.youtube._extraction_helpers import (
    get_optional_thumbnail,
    get_text_or_merged_runs,
    get_thumbnail,
    merge_runs,
    require_mapping,
    require_text,
    resolve_run_url,
    sanitize_url,
    to_int,
    try_parse_date,
)
from tests.fakes.youtube_payloads import link_run
from utils.errors import UnrecognizedRendererError, UnresolvedLinkError


class TestRuns:
    """Testes para merge_runs e get_text_or_merged_runs."""

    def test_merge_runs_concatenates_without_separator(self) -> None:
        assert merge_runs([{"text": "Olá "}, {"text": "mundo"}, {"text": "!"}]) == "Olá mundo!"

    def test_merge_runs_empty(self) -> None:
        assert merge_runs([]) == ""

    def test_simple_text_preferred(self) -> None:
        assert get_text_or_merged_runs({"simpleText": "a", "runs": [{"text": "b"}]}) == "a"

    def test_runs_fallback(self) -> None:
        assert get_text_or_merged_runs({"runs": [{"text": "a"}, {"text": "b"}]}) == "ab"

    def test_missing_text_is_none(self) -> None:
        assert get_text_or_merged_runs({"accessibility": {}}) is None
        assert get_text_or_merged_runs(None) is None

    def test_require_text_raises_with_key(self) -> None:
        with pytest.raises(UnrecognizedRendererError) as exc_info:
            require_text({"videoId": "x"}, "title", "gridVideoRenderer")
        assert exc_info.value.renderer == "gridVideoRenderer"
        assert exc_info.value.missing_key == "title"


class TestResolveRunUrl:
    """Testes para resolve_run_url."""

    def test_plain_run_has_no_url(self) -> None:
        assert resolve_run_url({"text": "sem link"}) is None

    def test_redirect_target_preferred(self) -> None:
        run = link_run(
            "twitter",
            "https://www.youtube.com/redirect?event=backstage&q=https%3A%2F%2Ftwitter.com%2Fselen&v=1",
        )
        assert resolve_run_url(run) == "https://twitter.com/selen"

    def test_internal_link_becomes_absolute(self) -> None:
        run = link_run("#hashtag", "/hashtag/selen")
        assert resolve_run_url(run) == "https://www.youtube.com/hashtag/selen"

    def test_custom_base_url(self) -> None:
        run = link_run("canal", "/@selen")
        assert resolve_run_url(run, "https://m.youtube.com") == "https://m.youtube.com/@selen"

    def test_url_endpoint_fallback(self) -> None:
        run = {"text": "x", "navigationEndpoint": {"urlEndpoint": {"url": "https://example.com/a"}}}
        assert resolve_run_url(run) == "https://example.com/a"

    def test_unresolvable_link_raises(self) -> None:
        run = {"text": "x", "navigationEndpoint": {"browseEndpoint": {"browseId": "UC1"}}}
        with pytest.raises(UnresolvedLinkError) as exc_info:
            resolve_run_url(run)
        assert "browseEndpoint" in exc_info.value.fragment

    def test_empty_navigation_endpoint_raises(self) -> None:
        """Endpoint presente mas vazio é link sem URL, não texto puro."""
        with pytest.raises(UnresolvedLinkError):
            resolve_run_url({"text": "x", "navigationEndpoint": {}})


class TestThumbnails:
    """Testes para sanitize_url e get_thumbnail."""

    def test_sanitize_drops_everything_after_first_equals(self) -> None:
        assert sanitize_url("https://yt3.ggpht.com/abc=s88-c-k") == "https://yt3.ggpht.com/abc"

    def test_sanitize_with_offset(self) -> None:
        assert sanitize_url("a=b=c=d", offset=1) == "a=b"
        assert sanitize_url("https://yt3.ggpht.com/abc=s88-c-k=rj", offset=1) == "https://yt3.ggpht.com/abc=s88-c-k"

    def test_thumbnail_offset_keeps_delimiters(self) -> None:
        thumbnails = [{"url": "https://yt3.ggpht.com/abc=s88-c-k=rj"}]
        assert get_thumbnail(thumbnails, offset=1) == "https://yt3.ggpht.com/abc=s88-c-k"
        assert get_thumbnail(thumbnails, offset=5) == "https://yt3.ggpht.com/abc=s88-c-k=rj"

    def test_sanitize_without_equals(self) -> None:
        assert sanitize_url("https://i.ytimg.com/vi/x/default.jpg") == "https://i.ytimg.com/vi/x/default.jpg"

    def test_get_thumbnail_picks_last(self) -> None:
        thumbnails = [{"url": "https://a/small=s1"}, {"url": "https://a/big=s2"}]
        assert get_thumbnail(thumbnails) == "https://a/big"

    def test_protocol_relative_url(self) -> None:
        assert get_thumbnail([{"url": "//yt3.ggpht.com/x=s48"}]) == "https://yt3.ggpht.com/x"

    def test_empty_list_raises(self) -> None:
        with pytest.raises(UnrecognizedRendererError):
            get_thumbnail([])

    def test_optional_thumbnail_absent(self) -> None:
        assert get_optional_thumbnail(None) is None
        assert get_optional_thumbnail({"accessibility": {}}) is None


class TestScalars:
    """Testes para try_parse_date, to_int e require_mapping."""

    def test_parse_iso_date(self) -> None:
        assert try_parse_date("2022-03-01T05:00:00+00:00") == datetime(2022, 3, 1, 5, tzinfo=UTC)

    def test_invalid_date_is_none(self) -> None:
        assert try_parse_date("ontem") is None
        assert try_parse_date(None) is None
        assert try_parse_date(12345) is None

    def test_to_int(self) -> None:
        assert to_int("7200") == 7200
        assert to_int(5) == 5
        assert to_int("abc") is None
        assert to_int(True) is None
        assert to_int(None) is None

    def test_require_mapping_rejects_non_dict(self) -> None:
        with pytest.raises(UnrecognizedRendererError):
            require_mapping({"metadata": []}, "metadata", "ytInitialData")
