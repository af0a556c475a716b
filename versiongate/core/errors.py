"""Version gate errors."""


class InvalidVersionFormat(ValueError):
    """Raised when a version string is not 1-3 dot-separated non-negative integers."""


class VersionCheckUnavailable(RuntimeError):
    """Raised when the update status cannot be determined.

    Wraps network failures, malformed remote config, and version parse
    errors. Callers treat it as "fail open": the app stays usable.
    """
