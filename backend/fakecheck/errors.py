class AnalysisError(Exception):
    """Base for failures that abort a profile analysis.

    ``category`` and ``status_code`` let callers map the failure to a
    user-facing outcome without inspecting the cause chain.
    """

    category = "analysis_failed"
    status_code = 500


class BrowserLaunchError(AnalysisError):
    """The rendering session could not be started."""

    category = "browser_unavailable"
    status_code = 503


class NavigationError(AnalysisError):
    """The profile page was unreachable or did not load in time."""

    category = "profile_inaccessible"
    status_code = 404


class ExtractionError(AnalysisError):
    """The page structure was not recognised as a profile at all."""

    category = "unprocessable_profile"
    status_code = 422


class AnalysisTimeoutError(AnalysisError):
    """The overall analysis deadline was exceeded."""

    category = "timeout"
    status_code = 408


class UnsupportedPlatformError(AnalysisError):
    """The URL does not belong to a supported platform."""

    category = "unsupported_platform"
    status_code = 400


class ImageProcessingError(Exception):
    """Profile picture retrieval or classification failed.

    Never aborts an analysis; the classifier turns it into a default result.
    """
