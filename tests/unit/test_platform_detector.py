"""Unit tests for platform detection and URL validation."""

import pytest

from services.platform_detector import (
    Platform,
    detect_platform,
    extract_video_id,
    validate_url,
    validate_urls_batch,
)


class TestDetectPlatform:
    """Tests for detect_platform."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.instagram.com/reel/ABC123xyz/",
            "https://instagram.com/p/Cx_1-2/",
            "instagram.com/tv/xyz",
        ],
    )
    def test_instagram(self, url):
        assert detect_platform(url) == Platform.INSTAGRAM

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.facebook.com/watch/?v=123456789",
            "https://m.facebook.com/user/videos/987654321/",
            "https://fb.watch/abcDEF/",
        ],
    )
    def test_facebook(self, url):
        assert detect_platform(url) == Platform.FACEBOOK

    @pytest.mark.parametrize(
        "url",
        ["https://example.com/video", "", "not a url", "https://youtube.com/watch?v=x"],
    )
    def test_unknown(self, url):
        assert detect_platform(url) == Platform.UNKNOWN

    def test_instagram_takes_precedence_over_facebook(self):
        url = "https://facebook.com/share?u=https://instagram.com/p/abc"
        assert detect_platform(url) == Platform.INSTAGRAM

    def test_deterministic(self):
        url = "https://fb.watch/xyz/"
        assert detect_platform(url) is detect_platform(url)

    def test_platform_values(self):
        assert [p.value for p in Platform] == ["Instagram", "Facebook", "Unknown"]


class TestExtractVideoId:
    """Tests for extract_video_id."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://www.instagram.com/reel/ABC123xyz/", "ABC123xyz"),
            ("https://www.instagram.com/p/Cx_1-2/?igsh=abc", "Cx_1-2"),
            ("https://www.instagram.com/tv/B8aXyZ/", "B8aXyZ"),
            ("https://www.instagram.com/someuser/", None),
        ],
    )
    def test_instagram(self, url, expected):
        assert extract_video_id(url, Platform.INSTAGRAM) == expected

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://www.facebook.com/watch/?v=123456789", "123456789"),
            ("https://www.facebook.com/watch?v=42", "42"),
            ("https://www.facebook.com/page/videos/987654321/", "987654321"),
            ("https://fb.watch/abcDEF/", "abcDEF"),
            ("https://www.facebook.com/reel/555", "555"),
            ("https://www.facebook.com/somepage", None),
        ],
    )
    def test_facebook(self, url, expected):
        assert extract_video_id(url, Platform.FACEBOOK) == expected

    def test_unknown_platform_has_no_id(self):
        assert extract_video_id("https://example.com/p/abc", Platform.UNKNOWN) is None


class TestValidateUrl:
    """Tests for validate_url and validate_urls_batch."""

    def test_valid_instagram(self):
        result = validate_url("https://www.instagram.com/reel/ABC123xyz/")
        assert result["valid"] is True
        assert result["platform"] == "Instagram"
        assert result["video_id"] == "ABC123xyz"
        assert result["error"] is None

    def test_invalid_format(self):
        result = validate_url("not a url")
        assert result["valid"] is False
        assert result["error"] == "Invalid URL format"

    def test_non_string(self):
        result = validate_url(123)
        assert result["valid"] is False
        assert result["error"] == "Invalid URL format"

    def test_unsupported_platform(self):
        result = validate_url("https://example.com/video")
        assert result["valid"] is False
        assert result["platform"] is None
        assert "Unsupported platform" in result["error"]

    def test_batch(self):
        results = validate_urls_batch(
            ["https://fb.watch/abc/", "https://example.com/video"]
        )
        assert [r["valid"] for r in results] == [True, False]
        assert results[0]["platform"] == "Facebook"
