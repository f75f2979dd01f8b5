from __future__ import annotations
import logging

logger = logging.getLogger("fakecheck.detect")


def is_challenge_page(page) -> bool:
    """Detect captcha, human verification or login walls in front of a profile.

    Heuristics-based: checks URL, common text markers, and challenge iframes.
    """
    try:
        url = (page.url or "").lower()
    except Exception:
        url = ""
    try:
        body_text = (page.inner_text("body") or "").lower()
    except Exception:
        body_text = ""
    # URL patterns seen during challenges and forced logins
    if any(k in url for k in ["/account/access", "/challenge", "/captcha", "/checkpoint", "/login", "/accounts/login"]):
        return True
    # Textual markers
    markers = [
        "captcha",
        "recaptcha",
        "are you a robot",
        "confirm you are a human",
        "help us confirm",
        "verify your identity",
        "unusual activity",
        "suspicious activity",
        "log in to continue",
        "you must log in",
    ]
    if any(m in body_text for m in markers):
        return True
    # reCAPTCHA/Arkose iframes
    try:
        if page.locator('iframe[src*="recaptcha"], iframe[title*="challenge" i]').count() > 0:
            return True
    except Exception:
        pass
    return False
