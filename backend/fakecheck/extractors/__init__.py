from ..errors import UnsupportedPlatformError
from .base import ProfileExtractor
from .facebook import FacebookExtractor
from .instagram import InstagramExtractor
from .twitter import TwitterExtractor

EXTRACTORS: dict[str, type[ProfileExtractor]] = {
    "facebook": FacebookExtractor,
    "instagram": InstagramExtractor,
    "twitter": TwitterExtractor,
}


def get_extractor(platform: str, overlay_wait_ms: int = 1000) -> ProfileExtractor:
    try:
        cls = EXTRACTORS[(platform or "").lower()]
    except KeyError:
        raise UnsupportedPlatformError(f"Unsupported platform: {platform}") from None
    return cls(overlay_wait_ms=overlay_wait_ms)
