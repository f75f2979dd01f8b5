from __future__ import annotations
import logging
import os
import pathlib
import re
import time
import uuid
from typing import Optional

import httpx

from .deadline import Deadline
from .errors import AnalysisTimeoutError, ImageProcessingError
from .types import PictureClassification

logger = logging.getLogger("fakecheck.picture")

SMALL_KB = 5
LARGE_KB = 500
DOWNLOAD_TIMEOUT_S = 20.0


def ensure_staging_dir(path: str) -> str:
    pathlib.Path(path).mkdir(parents=True, exist_ok=True)
    return path


def classify_size(size_bytes: int) -> PictureClassification:
    """Size heuristic standing in for real face detection.

    Tiny files are usually placeholders or icons, very large ones tend to be
    high-quality stock photos, anything in between is treated as a real
    user photo.
    """
    kb = size_bytes / 1024
    if kb < SMALL_KB:
        return PictureClassification(is_human=False, confidence=0.6, stock_photo=False)
    if kb > LARGE_KB:
        return PictureClassification(is_human=True, confidence=0.65, stock_photo=True)
    return PictureClassification(is_human=True, confidence=0.8, stock_photo=False)


class PictureClassifier:
    def __init__(self, staging_dir: str, transport: Optional[httpx.BaseTransport] = None, user_agent: Optional[str] = None):
        self.staging_dir = staging_dir
        self._transport = transport
        self._headers = {"User-Agent": user_agent} if user_agent else None

    def classify(
        self,
        image_url: Optional[str],
        platform: str = "unknown",
        username: str = "unknown",
        deadline: Optional[Deadline] = None,
    ) -> PictureClassification:
        if not image_url:
            return PictureClassification(is_human=False, confidence=0, stock_photo=False)

        path = self._staging_path(platform, username)
        try:
            self._download(image_url, path, deadline)
            size = os.stat(path).st_size
            result = classify_size(size)
            logger.info("classified picture size=%dB human=%s stock=%s", size, result.is_human, result.stock_photo)
            return result
        except AnalysisTimeoutError:
            raise
        except ImageProcessingError as e:
            logger.warning("profile picture unavailable: %s", e)
            return PictureClassification(is_human=False, confidence=0, stock_photo=False, error=str(e))
        except Exception as e:
            logger.warning("profile picture classification failed: %s", e)
            return PictureClassification(
                is_human=False, confidence=0, stock_photo=False, error=f"Failed to process profile picture: {e}"
            )
        finally:
            self._discard(path)

    def _staging_path(self, platform: str, username: str) -> str:
        safe = re.sub(r"[^A-Za-z0-9_.-]", "_", username or "unknown")[:64] or "unknown"
        name = f"{platform}_{safe}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}.jpg"
        return os.path.join(self.staging_dir, name)

    def _download(self, url: str, path: str, deadline: Optional[Deadline]) -> None:
        timeout = DOWNLOAD_TIMEOUT_S
        if deadline is not None:
            deadline.check("picture download")
            timeout = min(timeout, deadline.remaining_ms() / 1000.0)
        try:
            with httpx.Client(timeout=timeout, follow_redirects=True, transport=self._transport, headers=self._headers) as client:
                r = client.get(url)
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ImageProcessingError(f"picture download returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ImageProcessingError(f"picture download failed: {e}") from e
        with open(path, "wb") as f:
            f.write(r.content)

    @staticmethod
    def _discard(path: str) -> None:
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("could not delete temporary picture %s: %s", path, e)
