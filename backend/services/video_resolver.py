"""
Video metadata resolution for SocialSave.

Two modes:
- real: the URL is sent to the RapidAPI social media downloader and the
  best link is picked from its response
- demo: a placeholder descriptor is synthesized locally after a short delay

Real mode is chosen whenever a usable API key is supplied. Its failures are
final; there is no fallback to demo mode after a real attempt.
"""

import asyncio
import logging
import re
import time
from dataclasses import asdict, dataclass
from typing import Optional

import httpx

from services.errors import RemoteApiError, RemoteAuthError, UnsupportedPlatform
from services.platform_detector import Platform, detect_platform, extract_video_id
from utils.constants import (
    DEMO_AUTHOR,
    DEMO_DELAY_SECONDS,
    DEMO_DESCRIPTION,
    DEMO_DOWNLOAD_URL,
    DEMO_HASHTAGS,
    DEMO_THUMBNAIL_TEMPLATE,
    HD_QUALITY_TAGS,
    MIN_API_KEY_LENGTH,
    PLACEHOLDER_THUMBNAIL_URL,
    RAPIDAPI_ENDPOINT,
    RAPIDAPI_HOST,
    UNKNOWN_AUTHOR,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VideoDescriptor:
    """Resolved video, ready to be offered for download."""

    title: str
    author: str
    description: str
    platform: Platform
    thumbnail_url: str
    download_url: str
    is_demo: bool
    video_id: Optional[str] = None
    hashtags: tuple[str, ...] = ()
    estimated_duration: str = "Unknown"

    def __post_init__(self):
        if self.platform == Platform.UNKNOWN:
            raise ValueError("VideoDescriptor cannot have an Unknown platform")

    def suggested_filename(self) -> str:
        """File name for the download, e.g. 'instagram_video.mp4'."""
        return re.sub(r"[^a-z0-9]", "_", self.title, flags=re.IGNORECASE).lower() + ".mp4"

    def to_dict(self) -> dict:
        """Convert descriptor to dictionary for JSON serialization."""
        data = asdict(self)
        data["platform"] = self.platform.value
        data["hashtags"] = list(self.hashtags)
        return data


def is_real_mode(api_key: Optional[str]) -> bool:
    """True when the key is present and long enough to try the remote API."""
    return bool(api_key) and len(api_key.strip()) > MIN_API_KEY_LENGTH


def select_link(links: list[dict]) -> dict:
    """
    Pick the download link: the first HD/1080p entry, otherwise the first entry.

    Args:
        links: Non-empty list of {"quality": str, "link": str} dicts

    Returns:
        The selected link entry
    """
    for entry in links:
        quality = str(entry.get("quality") or "").lower()
        if quality in HD_QUALITY_TAGS:
            return entry
    return links[0]


def _text_field(data: dict, key: str) -> Optional[str]:
    """Return a response field only when it is a non-empty string."""
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


async def resolve(
    url: str,
    api_key: Optional[str] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    demo_delay: float = DEMO_DELAY_SECONDS,
) -> VideoDescriptor:
    """
    Resolve a social media URL into a VideoDescriptor.

    Args:
        url: The Instagram or Facebook URL
        api_key: Optional RapidAPI key; keys of 10 characters or fewer
            are ignored and demo mode is used
        client: Optional httpx client for the remote call
        demo_delay: Artificial latency of demo mode, in seconds

    Raises:
        UnsupportedPlatform: URL is neither Instagram nor Facebook
        RemoteAuthError: The API rejected the key
        RemoteApiError: Any other remote failure
    """
    url = url.strip()
    platform = detect_platform(url)
    if platform == Platform.UNKNOWN:
        raise UnsupportedPlatform()

    if is_real_mode(api_key):
        logger.info("Resolving %s URL via remote API", platform.value)
        return await remote_resolve(url, api_key.strip(), platform, client=client)

    logger.info("Resolving %s URL in demo mode", platform.value)
    return await demo_resolve(url, platform, delay=demo_delay)


async def remote_resolve(
    url: str,
    api_key: str,
    platform: Optional[Platform] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> VideoDescriptor:
    """
    Resolve a URL with a single call to the RapidAPI downloader.

    Raises:
        RemoteAuthError: HTTP 401 or 403
        RemoteApiError: Other HTTP errors, transport errors, or a response
            without usable links
    """
    if platform is None:
        platform = detect_platform(url)
    if platform == Platform.UNKNOWN:
        raise UnsupportedPlatform()

    headers = {
        "X-RapidAPI-Key": api_key,
        "X-RapidAPI-Host": RAPIDAPI_HOST,
    }

    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                response = await own_client.get(
                    RAPIDAPI_ENDPOINT, params={"url": url}, headers=headers
                )
        else:
            response = await client.get(
                RAPIDAPI_ENDPOINT, params={"url": url}, headers=headers
            )
    except httpx.HTTPError as e:
        logger.error("Remote API request failed: %s", e)
        raise RemoteApiError(str(e) or type(e).__name__) from e

    if response.status_code in (401, 403):
        logger.warning("Remote API rejected the key (HTTP %d)", response.status_code)
        raise RemoteAuthError()
    if not response.is_success:
        logger.error("Remote API returned HTTP %d", response.status_code)
        raise RemoteApiError(f"API error {response.status_code}")

    try:
        data = response.json()
    except ValueError as e:
        raise RemoteApiError("Invalid response from API") from e

    links = data.get("links") if isinstance(data, dict) else None
    if not isinstance(links, list):
        raise RemoteApiError("No download links found")
    links = [entry for entry in links if isinstance(entry, dict)]
    if not links:
        raise RemoteApiError("No download links found")

    link = select_link(links).get("link")
    if not isinstance(link, str) or not link.strip():
        raise RemoteApiError("No download links found")

    return VideoDescriptor(
        title=_text_field(data, "title") or f"{platform.value} Video",
        author=_text_field(data, "author") or UNKNOWN_AUTHOR,
        description=_text_field(data, "description") or "",
        platform=platform,
        thumbnail_url=_text_field(data, "picture") or PLACEHOLDER_THUMBNAIL_URL,
        download_url=link.strip(),
        is_demo=False,
        video_id=extract_video_id(url, platform),
        estimated_duration=str(data.get("duration") or "Unknown"),
    )


async def demo_resolve(
    url: str, platform: Platform, *, delay: float = DEMO_DELAY_SECONDS
) -> VideoDescriptor:
    """Synthesize a placeholder descriptor after an artificial delay."""
    await asyncio.sleep(delay)

    video_id = extract_video_id(url, platform)
    if video_id:
        label = "Post" if platform == Platform.INSTAGRAM else "Video"
        title = f"{platform.value} {label} ({video_id[:8]}...)"
        seed = video_id
    else:
        title = f"{platform.value} Video"
        prefix = "ig" if platform == Platform.INSTAGRAM else "fb"
        seed = f"{prefix}-{int(time.time() * 1000)}"

    return VideoDescriptor(
        title=title,
        author=DEMO_AUTHOR,
        description=DEMO_DESCRIPTION,
        platform=platform,
        thumbnail_url=DEMO_THUMBNAIL_TEMPLATE.format(seed=seed),
        download_url=DEMO_DOWNLOAD_URL,
        is_demo=True,
        video_id=video_id,
        hashtags=DEMO_HASHTAGS,
    )
