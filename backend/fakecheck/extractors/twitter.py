from __future__ import annotations
import logging
import re

from .base import FieldReader, ProfileExtractor, _click_first, parse_count

logger = logging.getLogger("fakecheck.extractors.twitter")


class TwitterExtractor(ProfileExtractor):
    platform = "twitter"
    placeholder = "default_profile"
    own_domains = ("twitter.com", "x.com")

    LOGIN_MODAL = 'div[aria-modal="true"]'
    CLOSE_BUTTONS = ['div[aria-label="Close"]', 'button[aria-label="Close"]', '[data-testid="app-bar-close"]']
    PICTURE = 'img[alt="Profile image"]'
    USERNAME = 'div[data-testid="UserName"]'
    BIO = 'div[data-testid="UserDescription"]'
    FOLLOW_LINKS = 'a[href*="/followers"], a[href*="/following"]'
    JOIN_DATE = 'span[data-testid="UserJoinDate"]'
    TWEETS = 'div[data-testid="tweetText"]'

    def dismiss_overlay(self, page) -> None:
        if page.locator(self.LOGIN_MODAL).count() == 0:
            return
        if _click_first(page, self.CLOSE_BUTTONS):
            logger.debug("closed login modal")
            self._wait(page)

    def read_fields(self, r: FieldReader) -> dict:
        fields = self._picture(r, self.PICTURE)
        fields["username"] = self._handle(r.text("username", self.USERNAME))
        fields["has_bio"] = bool(r.text("bio", self.BIO))
        fields.update(self._follow_counts(r.links("follow_counts", self.FOLLOW_LINKS)))
        fields["join_date"] = r.text("join_date", self.JOIN_DATE)
        fields["post_captions"] = self._captions(r.texts("post_captions", self.TWEETS))
        fields["has_external_links"] = self._external_links(r)
        return fields

    @staticmethod
    def _handle(text) -> str:
        """The UserName block renders "Display Name@handle"; keep the handle."""
        if not text:
            return ""
        handles = re.findall(r"@(\w+)", text)
        return handles[-1] if handles else text.strip()

    @staticmethod
    def _follow_counts(links) -> dict:
        out = {"followers": None, "following": None}
        for href, text in links:
            if "/followers" in href:
                out["followers"] = parse_count(text, "followers")
            elif "/following" in href:
                out["following"] = parse_count(text, "following")
        return out
