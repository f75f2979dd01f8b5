from __future__ import annotations
import logging

from .base import FieldReader, ProfileExtractor, parse_count, parse_int

logger = logging.getLogger("fakecheck.extractors.instagram")


class InstagramExtractor(ProfileExtractor):
    platform = "instagram"
    placeholder = "default"
    own_domains = ("instagram.com",)

    LOGIN_DIALOG = 'div[role="dialog"]'
    PICTURE = 'img[alt*="profile picture"]'
    USERNAME = "h2"
    BIO = "h1"
    STATS = "li"
    CAPTIONS = 'div[class*="caption"]'
    TAGGED_TAB = 'a[href*="/tagged"]'

    def dismiss_overlay(self, page) -> None:
        if page.locator(self.LOGIN_DIALOG).count() == 0:
            return
        # the login dialog closes on a click outside of it
        page.mouse.click(10, 10)
        logger.debug("clicked outside login dialog")
        self._wait(page)

    def read_fields(self, r: FieldReader) -> dict:
        fields = self._picture(r, self.PICTURE)
        fields["username"] = r.text("username", self.USERNAME) or ""
        fields["has_bio"] = bool(r.text("bio", self.BIO))
        fields["post_count"] = parse_int(r.find_text("post_count", "span", "posts"), "posts")
        fields.update(self._follow_counts(r.texts("follow_counts", self.STATS)))
        fields["post_captions"] = self._captions(r.texts("post_captions", self.CAPTIONS))
        fields["has_external_links"] = self._external_links(r)
        fields["has_tagged_content"] = r.exists("tagged_content", self.TAGGED_TAB)
        return fields

    @staticmethod
    def _follow_counts(texts) -> dict:
        out = {"followers": None, "following": None}
        for text in texts:
            low = text.lower()
            if "followers" in low:
                out["followers"] = parse_count(low, "followers")
            elif "following" in low:
                out["following"] = parse_count(low, "following")
        return out
