from __future__ import annotations
import asyncio
import logging
from typing import Callable, Optional
from playwright.sync_api import Error as PwError

from .browser import BrowserSession
from .config import Settings, settings as default_settings
from .deadline import Deadline
from .errors import AnalysisTimeoutError, NavigationError
from .extractors import get_extractor
from .picture import PictureClassifier, ensure_staging_dir
from .scoring import confidence, is_fake, score_profile
from .types import AnalysisResult, PictureClassification, Platform

logger = logging.getLogger("fakecheck.analyzer")

NO_PICTURE = "No profile picture found"


class ProfileAnalyzer:
    """Runs one analysis per call: open session, extract, classify, score, release.

    Nothing is shared between calls except the staging directory, which is
    created here once and handed to the classifier.
    """

    def __init__(
        self,
        cfg: Optional[Settings] = None,
        session_factory: Callable[[Settings], BrowserSession] = BrowserSession,
        classifier: Optional[PictureClassifier] = None,
    ):
        self.cfg = cfg or default_settings
        self.session_factory = session_factory
        if classifier is None:
            classifier = PictureClassifier(ensure_staging_dir(self.cfg.staging_dir), user_agent=self.cfg.user_agent)
        self.classifier = classifier

    def analyze(self, url: str, platform: Platform) -> AnalysisResult:
        cfg = self.cfg
        nav_timeout_ms = cfg.navigation_timeout_ms
        settle_ms = cfg.settle_ms
        deadline = Deadline(cfg.analysis_timeout_ms)
        extractor = get_extractor(platform, overlay_wait_ms=cfg.overlay_wait_ms)
        logger.info("analysis start url=%s platform=%s timeout=%dms", url, platform, deadline.timeout_ms)

        with self.session_factory(cfg) as session:
            deadline.check("browser launch")
            try:
                page = session.open(url, max(1, deadline.bound(nav_timeout_ms)))
            except NavigationError as e:
                if deadline.expired():
                    raise AnalysisTimeoutError(f"analysis exceeded {deadline.timeout_ms}ms during navigation") from e
                raise
            try:
                page.set_default_timeout(max(1, deadline.remaining_ms()))
            except Exception:
                pass
            try:
                page.wait_for_timeout(deadline.bound(settle_ms))
            except PwError as e:
                raise NavigationError(f"Failed to load page: {e.message}") from e
            deadline.check("page settle")

            snapshot = extractor.extract(page)
            deadline.check("extraction")

            if snapshot.has_profile_picture and snapshot.profile_picture_url:
                pic = self.classifier.classify(
                    snapshot.profile_picture_url,
                    platform=platform,
                    username=snapshot.username or "unknown",
                    deadline=deadline,
                )
            else:
                pic = PictureClassification(is_human=False, confidence=0, stock_photo=False, error=NO_PICTURE)
            snapshot.profile_picture_analysis = pic
            deadline.check("picture classification")

        score, indicators = score_profile(snapshot, pic)
        result = AnalysisResult(
            url=url,
            platform=platform,
            analysis_data=snapshot,
            score=score,
            indicators=indicators,
            is_fake=is_fake(score),
            confidence=confidence(score),
        )
        logger.info("analysis done url=%s score=%d fake=%s indicators=%d", url, score, result.is_fake, len(indicators))
        return result

    async def analyze_async(self, url: str, platform: Platform) -> AnalysisResult:
        # sync Playwright runs in a worker thread; the deadline bounds it from inside
        return await asyncio.to_thread(self.analyze, url, platform)
