"""Rule-based fake-profile score.

Start at BASELINE and apply the rules below in order; each may shift the
score and append an Indicator. The final score is clamped to [0, 100].
No I/O: the current year is the only outside input and can be injected.
"""
from __future__ import annotations
import re
from datetime import datetime
from typing import List, Optional, Tuple

from .types import Indicator, PictureClassification, ProfileSnapshot

BASELINE = 60
FAKE_THRESHOLD = 45

_TRAILING_DIGITS = re.compile(r"[a-zA-Z]+[0-9]{4,}")
_GENERIC_NAME = re.compile(r"official|real|original|authentic|\d{6,}")
_JOIN_DATE = re.compile(
    r"(January|February|March|April|May|June|July|August|September|October|November|December)\s+(\d{4})"
)
_EMOJI = re.compile("[\U0001F300-\U0001F6FF\u2600-\u26FF]")


def is_suspicious_username(username: str) -> bool:
    if not username:
        return False
    return bool(
        _TRAILING_DIGITS.search(username)
        or username.count("_") > 2
        or _GENERIC_NAME.search(username.lower())
    )


def join_year(join_date: Optional[str]) -> Optional[int]:
    if not join_date:
        return None
    m = _JOIN_DATE.search(join_date)
    return int(m.group(2)) if m else None


def is_spammy_caption(caption: str) -> bool:
    return caption.count("#") > 15 or len(_EMOJI.findall(caption)) > 10


def score_profile(
    snapshot: ProfileSnapshot,
    classification: Optional[PictureClassification] = None,
    current_year: Optional[int] = None,
) -> Tuple[int, List[Indicator]]:
    if classification is None:
        classification = snapshot.profile_picture_analysis
    if current_year is None:
        current_year = datetime.now().year

    score = BASELINE
    indicators: List[Indicator] = []

    def hit(delta: int, factor: str, issue: str, impact: str) -> None:
        nonlocal score
        score += delta
        indicators.append(Indicator(factor=factor, issue=issue, impact=impact))

    # 1. profile picture
    if not snapshot.has_profile_picture:
        hit(-15, "Profile Picture", "No profile picture or default image", "high")
    elif classification is not None and classification.is_human:
        hit(10, "Profile Picture", "Profile has a human photo", "positive")
    elif classification is not None and classification.stock_photo:
        hit(-10, "Profile Picture", "Profile uses a stock photo", "medium")
    else:
        hit(5, "Profile Picture", "Profile has a picture", "positive")

    # 2. username
    if is_suspicious_username(snapshot.username):
        hit(-10, "Username", "Suspicious username pattern", "medium")

    # 3. bio
    if not snapshot.has_bio:
        hit(-5, "Bio", "Missing bio information", "low")
    else:
        hit(5, "Bio", "Profile has bio information", "positive")

    # 4. post count
    if snapshot.post_count is not None and snapshot.post_count < 3:
        hit(-10, "Post Count", "Very few posts", "medium")

    # 5. followers / following
    if snapshot.follow_ratio is not None:
        if (snapshot.followers or 0) < 10 and (snapshot.following or 0) > 100:
            hit(-15, "Follow Ratio", "Low followers but following many accounts", "high")
        elif snapshot.follow_ratio > 10:
            hit(-10, "Follow Ratio", "Suspicious follower/following ratio", "medium")

    # 6. account age
    year = join_year(snapshot.join_date)
    if year is not None:
        if current_year - year < 1:
            hit(-10, "Account Age", "Recently created account", "medium")
        else:
            score += 5

    # 7. post content
    captions = snapshot.post_captions
    if captions:
        hit(5, "Post Content", "Profile has visible posts", "positive")
        if any(is_spammy_caption(c) for c in captions):
            hit(-5, "Post Content", "Excessive hashtags or emojis", "low")
    elif captions is not None:
        hit(-5, "Post Content", "No visible posts", "low")

    # external links are recorded on the snapshot but not scored

    # 8. tagged content (instagram)
    if snapshot.has_tagged_content is False:
        hit(-5, "Tagged Content", "No tagged content", "low")

    # 9. friend count (facebook)
    if snapshot.friend_count is not None and snapshot.friend_count < 10:
        hit(-10, "Friend Count", "Very few friends", "medium")

    return max(0, min(100, score)), indicators


def is_fake(score: int) -> bool:
    return score < FAKE_THRESHOLD


def confidence(score: int) -> float:
    # not clamped: reaches 110 at score 100
    return abs(FAKE_THRESHOLD - score) * 2
