from __future__ import annotations
import logging

from .base import FieldReader, ProfileExtractor, _click_first, parse_int

logger = logging.getLogger("fakecheck.extractors.facebook")


class FacebookExtractor(ProfileExtractor):
    platform = "facebook"
    placeholder = "silhouette"
    own_domains = ("facebook.com",)

    LOGIN_POPUP = ".x9f619.x1n2onr6.x1ja2u2z"
    CLOSE_BUTTONS = ['div[aria-label="Close"]']
    PICTURE = 'img[data-imgperflogname="profileCoverPhoto"]'
    NAME = "h1"
    # intro/about blocks double as the visible post text containers
    TEXT_BLOCKS = ".kvgmc6g5.cxmmr5t8.oygrvhab.hcukyx3x.c1et5uql"
    COMMENTS = ".ecm0bbzt.e5nlhep0.a8c37x1j"
    FRIENDS = 'a[href*="/friends"]'

    def dismiss_overlay(self, page) -> None:
        if page.locator(self.LOGIN_POPUP).count() == 0:
            return
        if _click_first(page, self.CLOSE_BUTTONS):
            logger.debug("closed login popup")
            self._wait(page)

    def read_fields(self, r: FieldReader) -> dict:
        fields = self._picture(r, self.PICTURE)
        fields["username"] = r.text("username", self.NAME) or ""
        fields["has_bio"] = r.exists("bio", self.TEXT_BLOCKS)
        fields["join_date"] = r.find_text("join_date", "span", "Joined")
        fields["post_captions"] = self._captions(r.texts("post_captions", self.TEXT_BLOCKS), min_len=10)
        fields["has_comments"] = r.exists("comments", self.COMMENTS)
        fields["has_external_links"] = self._external_links(r)
        fields["friend_count"] = self._friend_count(r)
        return fields

    def _friend_count(self, r: FieldReader):
        for _href, text in r.links("friend_count", self.FRIENDS):
            if "friends" in text:
                return parse_int(text, "friends")
        return None
