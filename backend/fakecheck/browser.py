from __future__ import annotations
import logging
from typing import Optional
from playwright.sync_api import sync_playwright, Error as PwError, TimeoutError as PwTimeout
from .config import Settings, settings as default_settings
from .errors import BrowserLaunchError, NavigationError

logger = logging.getLogger("fakecheck.browser")

_HIDE_WEBDRIVER = "Object.defineProperty(navigator, 'webdriver', { get: () => undefined });"


class BrowserSession:
    """One isolated Chromium session per analysis.

    Use as a context manager; the driver, browser and context are released
    on every exit path, exactly once.
    """

    def __init__(self, cfg: Optional[Settings] = None):
        self.cfg = cfg or default_settings
        self._pw = None
        self._browser = None
        self._ctx = None
        self._closed = False

    def __enter__(self) -> "BrowserSession":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def start(self) -> None:
        cfg = self.cfg
        try:
            self._pw = sync_playwright().start()
            launch_kwargs = {"headless": cfg.headless, "args": cfg.chromium_args}
            if cfg.executable_path:
                launch_kwargs["executable_path"] = cfg.executable_path
            self._browser = self._pw.chromium.launch(**launch_kwargs)
            self._ctx = self._browser.new_context(
                viewport={"width": cfg.viewport_width, "height": cfg.viewport_height},
                user_agent=cfg.user_agent,
            )
        except Exception as e:
            logger.exception("failed to launch browser")
            self.close()
            raise BrowserLaunchError(f"Failed to launch browser: {e}") from e
        try:
            self._ctx.add_init_script(_HIDE_WEBDRIVER)
        except Exception:
            logger.debug("could not install webdriver init script")
        logger.info("browser launched headless=%s executable=%s", cfg.headless, cfg.executable_path or "bundled")

    def open(self, url: str, navigation_timeout_ms: int = 30000):
        """Navigate a fresh page to url and return it once DOM content is loaded."""
        if self._ctx is None:
            raise BrowserLaunchError("browser session is not started")
        logger.info("navigating to %s (timeout=%dms)", url, navigation_timeout_ms)
        try:
            page = self._ctx.new_page()
            page.set_default_navigation_timeout(navigation_timeout_ms)
            resp = page.goto(url, wait_until="domcontentloaded", timeout=navigation_timeout_ms)
        except PwTimeout as e:
            raise NavigationError(f"Failed to load page: timed out after {navigation_timeout_ms}ms") from e
        except PwError as e:
            raise NavigationError(f"Failed to load page: {e.message}") from e
        logger.info("page loaded status=%s", resp.status if resp is not None else "n/a")
        return page

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._ctx is not None:
            try:
                self._ctx.close()
            except Exception:
                logger.warning("error closing browser context", exc_info=True)
        if self._browser is not None:
            try:
                self._browser.close()
            except Exception:
                logger.warning("error closing browser", exc_info=True)
        if self._pw is not None:
            try:
                self._pw.stop()
            except Exception:
                logger.warning("error stopping playwright", exc_info=True)
        self._ctx = self._browser = self._pw = None
        logger.info("browser session closed")
