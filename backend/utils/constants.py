"""
Platform patterns and constants for SocialSave.
"""

import re

APP_VERSION = "1.0.0"

# Substrings that identify each platform, checked in order
PLATFORM_MARKERS = {
    "Instagram": ("instagram.com",),
    "Facebook": ("facebook.com", "fb.watch"),
}

# Video id patterns per platform
VIDEO_ID_PATTERNS = {
    "Instagram": re.compile(r"/(?:p|reel|tv)/(?P<id>[A-Za-z0-9_-]+)"),
    "Facebook": re.compile(
        r"(?:videos/|watch/?\?v=|fb\.watch/|reel/)(?P<id>[A-Za-z0-9_-]+)"
    ),
}

# Remote resolution API (RapidAPI)
RAPIDAPI_HOST = "social-media-video-downloader.p.rapidapi.com"
RAPIDAPI_ENDPOINT = f"https://{RAPIDAPI_HOST}/smvd/get/all"
HD_QUALITY_TAGS = ("hd", "1080p")

# Keys this short or shorter never reach the remote API
MIN_API_KEY_LENGTH = 10

# Demo mode
DEMO_DELAY_SECONDS = 0.8
DEMO_DOWNLOAD_URL = (
    "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4"
)
DEMO_THUMBNAIL_TEMPLATE = "https://picsum.photos/seed/{seed}/600/400"
DEMO_AUTHOR = "Unknown User (Private)"
DEMO_DESCRIPTION = (
    "Ready to download. Original metadata is hidden due to privacy settings."
)
DEMO_HASHTAGS = ("video", "social", "download")

PLACEHOLDER_THUMBNAIL_URL = "https://picsum.photos/600/400"
UNKNOWN_AUTHOR = "Unknown"

# History
DEFAULT_HISTORY_LIMIT = 10

# Request limits
MAX_URLS_PER_REQUEST = 100
