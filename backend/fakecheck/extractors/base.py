from __future__ import annotations
import logging
import re
from typing import Any, Iterable, List, Optional
from urllib.parse import urlparse

from ..detect import is_challenge_page
from ..errors import ExtractionError
from ..types import Platform, ProfileSnapshot

logger = logging.getLogger("fakecheck.extractors")

MAX_CAPTIONS = 5

# fields that only a profile page yields; footer links, list items and tabs
# show up on login and consent walls too
IDENTIFYING_FIELDS = (
    "profile_picture_url",
    "username",
    "has_bio",
    "post_count",
    "followers",
    "following",
    "join_date",
    "friend_count",
)

# Small DOM probes; every probe takes its selector(s) as the evaluate argument
# and returns plain JSON so all parsing happens on the python side.
TEXT_JS = "(sel) => { const el = document.querySelector(sel); return el ? el.textContent.trim() : null; }"
TEXTS_JS = "(sel) => Array.from(document.querySelectorAll(sel)).map(el => el.textContent.trim())"
SRC_JS = "(sel) => { const el = document.querySelector(sel); return el ? (el.getAttribute('src') || el.src || '') : null; }"
EXISTS_JS = "(sel) => !!document.querySelector(sel)"
HREFS_JS = "(sel) => Array.from(document.querySelectorAll(sel)).map(el => el.getAttribute('href') || '')"
LINKS_JS = (
    "(sel) => Array.from(document.querySelectorAll(sel))"
    ".map(el => [el.getAttribute('href') || '', el.textContent.trim()])"
)
FIND_TEXT_JS = (
    "([sel, needle]) => { const el = Array.from(document.querySelectorAll(sel))"
    ".find(n => n.textContent.includes(needle)); return el ? el.textContent.trim() : null; }"
)


def parse_count(text: Optional[str], label: str) -> Optional[float]:
    """Leading number before ``label`` in free text, thousands separators stripped.

    "1,234 followers" -> 1234.0; "1.2K followers" -> 1.2 (abbreviations are
    not expanded here).
    """
    if not text:
        return None
    m = re.search(rf"(\d[\d,]*(?:\.\d+)?)[a-zA-Z]?\s*{re.escape(label)}", text, re.I)
    if not m:
        return None
    try:
        return float(m.group(1).replace(",", ""))
    except ValueError:
        return None


def parse_int(text: Optional[str], label: str) -> Optional[int]:
    val = parse_count(text, label)
    return None if val is None else int(val)


def has_real_picture(src: Optional[str], placeholder: str) -> bool:
    return bool(src) and placeholder not in src


def external_links(hrefs: Iterable[str], own_domains: Iterable[str]) -> bool:
    """True when any absolute link points off the platform's own hosts."""
    own = tuple(own_domains)
    for h in hrefs:
        host = (urlparse(h).hostname or "") if h else ""
        if host and not any(host == d or host.endswith("." + d) for d in own):
            return True
    return False


def recognised_fields(fields: dict) -> List[str]:
    return [k for k in IDENTIFYING_FIELDS if fields.get(k) not in (None, "") and fields.get(k) is not False]


def _click_first(page, selectors: list[str], timeout_ms=1500) -> bool:
    for sel in selectors:
        try:
            loc = page.locator(sel)
            if loc.count() == 0:
                continue
            loc.first.click(timeout=timeout_ms)
            return True
        except Exception:
            continue
    return False


class FieldReader:
    """Guarded DOM probes for one extraction run.

    A probe that raises yields the caller's default and lands in ``failed``;
    ``derived`` records the probes that produced a non-empty value.
    """

    def __init__(self, page, platform: str):
        self.page = page
        self.platform = platform
        self.derived: set[str] = set()
        self.failed: set[str] = set()

    def _probe(self, field: str, script: str, arg: Any, default: Any) -> Any:
        try:
            value = self.page.evaluate(script, arg)
        except Exception as e:
            self.failed.add(field)
            logger.debug("%s: %s unavailable: %s", self.platform, field, e)
            return default
        if value is None:
            return default
        if value:
            self.derived.add(field)
        return value

    def text(self, field: str, sel: str) -> Optional[str]:
        return self._probe(field, TEXT_JS, sel, None)

    def texts(self, field: str, sel: str) -> List[str]:
        return list(self._probe(field, TEXTS_JS, sel, []))

    def src(self, field: str, sel: str) -> Optional[str]:
        return self._probe(field, SRC_JS, sel, None)

    def exists(self, field: str, sel: str) -> bool:
        return bool(self._probe(field, EXISTS_JS, sel, False))

    def hrefs(self, field: str, sel: str) -> List[str]:
        return list(self._probe(field, HREFS_JS, sel, []))

    def links(self, field: str, sel: str) -> List[tuple[str, str]]:
        return [(h, t) for h, t in self._probe(field, LINKS_JS, sel, [])]

    def find_text(self, field: str, sel: str, needle: str) -> Optional[str]:
        return self._probe(field, FIND_TEXT_JS, [sel, needle], None)


class ProfileExtractor:
    """Turns a rendered profile page into a ProfileSnapshot.

    Subclasses set the platform tag, the placeholder marker of the default
    avatar, and the platform's own domains, and implement ``dismiss_overlay``
    and ``read_fields``.
    """

    platform: Platform
    placeholder: str = "default"
    own_domains: tuple[str, ...] = ()

    def __init__(self, overlay_wait_ms: int = 1000):
        self.overlay_wait_ms = overlay_wait_ms

    def extract(self, page) -> ProfileSnapshot:
        try:
            self.dismiss_overlay(page)
        except Exception as e:
            logger.warning("%s: overlay dismissal failed, continuing: %s", self.platform, e)

        reader = FieldReader(page, self.platform)
        fields = self.read_fields(reader)
        recognised = recognised_fields(fields)
        if not recognised:
            msg = f"Could not recognise a {self.platform} profile on {getattr(page, 'url', 'page')}"
            if is_challenge_page(page):
                msg += " (login or verification wall)"
            raise ExtractionError(msg)

        snapshot = ProfileSnapshot(platform=self.platform, **fields)
        logger.info(
            "%s: extracted username=%r fields=%s probes=%d fallbacks=%d",
            self.platform, snapshot.username, ",".join(recognised), len(reader.derived), len(reader.failed),
        )
        return snapshot

    def dismiss_overlay(self, page) -> None:
        """Close a login/consent overlay if one covers the profile."""

    def read_fields(self, r: FieldReader) -> dict:
        raise NotImplementedError

    # helpers shared by the platform adapters

    def _picture(self, r: FieldReader, sel: str) -> dict:
        src = r.src("profile_picture", sel)
        return {
            "has_profile_picture": has_real_picture(src, self.placeholder),
            "profile_picture_url": src or None,
        }

    def _captions(self, texts: List[str], min_len: int = 0) -> List[str]:
        return [t for t in texts if len(t) > min_len][:MAX_CAPTIONS]

    def _external_links(self, r: FieldReader) -> bool:
        return external_links(r.hrefs("external_links", 'a[href*="http"]'), self.own_domains)

    def _wait(self, page) -> None:
        try:
            page.wait_for_timeout(self.overlay_wait_ms)
        except Exception:
            pass
