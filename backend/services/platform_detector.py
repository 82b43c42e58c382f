"""
Platform detection service for SocialSave.
"""

from enum import Enum
from typing import Optional

import validators

from utils.constants import PLATFORM_MARKERS, VIDEO_ID_PATTERNS
from services.errors import UnsupportedPlatform


class Platform(str, Enum):
    INSTAGRAM = "Instagram"
    FACEBOOK = "Facebook"
    UNKNOWN = "Unknown"


def detect_platform(url: str) -> Platform:
    """
    Classify a URL by platform using substring matching.

    Instagram is checked before Facebook, so a URL containing both
    markers is Instagram. Anything unrecognized is Platform.UNKNOWN.
    """
    for name, markers in PLATFORM_MARKERS.items():
        if any(marker in url for marker in markers):
            return Platform(name)
    return Platform.UNKNOWN


def extract_video_id(url: str, platform: Platform) -> Optional[str]:
    """
    Extract the post/video identifier from a URL.

    Args:
        url: The URL to analyze
        platform: The platform the URL was classified as

    Returns:
        The identifier, or None if the URL carries none
    """
    regex = VIDEO_ID_PATTERNS.get(platform.value)
    if regex is None:
        return None
    match = regex.search(url)
    if match:
        return match.group("id")
    return None


def validate_url(url: str) -> dict:
    """
    Validate if URL is supported and return detailed information.

    Args:
        url: The URL to validate

    Returns:
        dict with validation results:
        {
            "valid": bool,
            "url": str,
            "platform": str | None,
            "video_id": str | None,
            "error": str | None
        }
    """
    result = {
        "valid": False,
        "url": url,
        "platform": None,
        "video_id": None,
        "error": None,
    }

    if not isinstance(url, str) or not validators.url(url.strip()):
        result["error"] = "Invalid URL format"
        return result

    url = url.strip()
    platform = detect_platform(url)
    if platform == Platform.UNKNOWN:
        result["error"] = UnsupportedPlatform.default_message
        return result

    result["valid"] = True
    result["platform"] = platform.value
    result["video_id"] = extract_video_id(url, platform)
    return result


def validate_urls_batch(urls: list[str]) -> list[dict]:
    """
    Validate multiple URLs and return results for each.

    Args:
        urls: List of URLs to validate

    Returns:
        List of validation result dicts
    """
    return [validate_url(url) for url in urls]
