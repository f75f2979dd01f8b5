from .errors import UnsupportedPlatformError
from .types import Platform

# substring -> platform; first match wins
_DOMAINS: list[tuple[str, Platform]] = [
    ("facebook.com", "facebook"),
    ("fb.com", "facebook"),
    ("instagram.com", "instagram"),
    ("twitter.com", "twitter"),
    ("x.com", "twitter"),
]


def detect_platform(url: str) -> Platform:
    u = (url or "").strip().lower()
    for domain, platform in _DOMAINS:
        if domain in u:
            return platform
    raise UnsupportedPlatformError(
        "Unsupported social media platform. Please provide a Facebook, Instagram, or Twitter URL."
    )
