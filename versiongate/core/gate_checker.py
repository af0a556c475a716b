"""Version gate checker: remote config fetch, cache fallback, fail-open.

Architecture:
  GateChecker: pure Python logic (no Qt dependency), blocking methods
  GateWorker:  QThread wrapper with pyqtSignal for thread-safe UI updates

The decision itself lives in core.resolver; this module only gathers inputs
and decides what to do when they can't be gathered.
"""

import dataclasses
import json
import logging
from http.client import HTTPException
from urllib.error import URLError
from urllib.request import Request, urlopen

from versiongate.branding import AppBranding
from versiongate.core.cache import GateCache
from versiongate.core.errors import InvalidVersionFormat, VersionCheckUnavailable
from versiongate.core.models import GateConfig, GateDecision, UpdateStatus, VersionGateInput
from versiongate.core.resolver import resolve_update_status
from versiongate.core.versioning import parse_version, release_version
from versiongate.network.detector import NetworkDetector

logger = logging.getLogger(__name__)

# Launch must never wait long on the gate
DEFAULT_TIMEOUT = 5.0


class GateChecker:
    """Fetches the version-gate document and turns it into a GateDecision.

    All methods are synchronous (blocking), designed to run in a QThread.
    check() never raises: any failure ends in the cached config or UP_TO_DATE.
    """

    def __init__(self, config_url: str, platform: str, installed_version: str,
                 cache: GateCache | None = None,
                 timeout: float = DEFAULT_TIMEOUT,
                 detector: NetworkDetector | None = None):
        self.config_url = config_url
        self.platform = platform
        self.installed_version = installed_version
        self.cache = cache
        self.timeout = timeout
        self.detector = detector or NetworkDetector()

    # ── Fetch ────────────────────────────────────────────────────────

    def fetch_config(self) -> GateConfig:
        """GET the gate document and extract this platform's row.

        Raises VersionCheckUnavailable on any network or format problem.
        """
        if not self.config_url:
            raise VersionCheckUnavailable("No gate config URL configured")

        try:
            req = Request(self.config_url, headers={
                'User-Agent': AppBranding.user_agent(),
                'Accept': 'application/json',
            })
            with urlopen(req, timeout=self.timeout) as resp:
                document = json.loads(resp.read().decode('utf-8'))
        except (URLError, OSError, ValueError, HTTPException) as e:
            # ValueError also covers JSON and UTF-8 decode errors
            raise VersionCheckUnavailable(f"Failed to fetch gate config: {e}") from e

        return GateConfig.from_dict(select_platform_row(document, self.platform),
                                    self.platform)

    # ── Check ────────────────────────────────────────────────────────

    def check(self) -> GateDecision:
        """Run one gate check: fetch, else cache, else fail open."""
        error = ""

        if not self.detector.is_online():
            error = "offline"
        else:
            try:
                config = self.fetch_config()
                logger.info("Fetched gate config for %s", self.platform)
                status = self.resolve(config)
            except VersionCheckUnavailable as e:
                logger.warning("Gate check failed: %s", e)
                error = str(e)
            else:
                # Only a row that resolved becomes the last known good one
                if self.cache is not None:
                    self.cache.store(config)
                return self._decision(config, status)

        cached = self._load_cached()
        if cached is not None:
            try:
                status = self.resolve(cached)
            except VersionCheckUnavailable as e:
                logger.warning("Cached gate config unusable: %s", e)
            else:
                return self._decision(cached, status, from_cache=True, error=error)

        logger.warning("No usable gate config, treating as up to date")
        return GateDecision(
            status=UpdateStatus.UP_TO_DATE,
            installed_version=self.installed_version,
            error=error or "no gate config",
        )

    def _load_cached(self) -> GateConfig | None:
        if self.cache is None:
            return None
        cached = self.cache.load()
        if cached is None or cached.platform != self.platform:
            return None
        logger.info("Using cached gate config for %s", self.platform)
        # A stale maintenance flag must not lock users out
        return dataclasses.replace(cached, maintenance_mode=False)

    def _decision(self, config: GateConfig, status: UpdateStatus,
                  from_cache: bool = False, error: str = "") -> GateDecision:
        logger.info("Gate status for v%s on %s: %s%s",
                    self.installed_version, self.platform, status.name,
                    " (cached)" if from_cache else "")
        return GateDecision(
            status=status,
            installed_version=self.installed_version,
            latest_version=config.current_version,
            store_url=config.store_url,
            maintenance_message=config.maintenance_message,
            from_cache=from_cache,
            error=error,
        )

    def resolve(self, config: GateConfig) -> UpdateStatus:
        """Parse the installed version and the row's floors, then resolve."""
        try:
            gate_input = VersionGateInput(
                current_version=release_version(self.installed_version),
                minimum_version=parse_version(config.minimum_version),
                force_minimum_version=parse_version(config.force_minimum_version),
                maintenance_mode=config.maintenance_mode,
            )
        except InvalidVersionFormat as e:
            raise VersionCheckUnavailable(f"Invalid version in gate config: {e}") from e
        return resolve_update_status(gate_input)


def select_platform_row(document, platform: str) -> dict:
    """Pick this platform's row out of a gate document.

    Accepted shapes:
      [{"platform": "ios", ...}, ...]     list of database rows
      {"ios": {...}, "android": {...}}    object keyed by platform
      {"minimum_version": ..., ...}       single-platform flat object
    """
    if isinstance(document, list):
        for row in document:
            if isinstance(row, dict) and row.get('platform') == platform:
                return row
        raise VersionCheckUnavailable(f"No gate config row for platform {platform!r}")

    if not isinstance(document, dict):
        raise VersionCheckUnavailable("Gate config is neither a list nor an object")

    if platform in document and isinstance(document[platform], dict):
        return document[platform]

    row_keys = {'minimum_version', 'force_minimum_version', 'maintenance_mode'}
    if row_keys & document.keys():
        row_platform = document.get('platform')
        if row_platform and row_platform != platform:
            raise VersionCheckUnavailable(
                f"Gate config is for {row_platform!r}, not {platform!r}"
            )
        return document

    raise VersionCheckUnavailable(f"No gate config for platform {platform!r}")


def should_prompt(decision: GateDecision, dismissed_version: str) -> bool:
    """Whether the UI should surface this decision.

    A soft update dismissed for a given latest version stays hidden until a
    newer version is published. Blocking statuses are never suppressed.
    """
    if decision.status is UpdateStatus.UP_TO_DATE:
        return False
    if decision.status is not UpdateStatus.SOFT_UPDATE_AVAILABLE:
        return True
    if not dismissed_version:
        return True
    try:
        latest = parse_version(decision.latest_version)
        dismissed = parse_version(dismissed_version)
    except InvalidVersionFormat:
        return True
    return latest > dismissed


def can_dismiss(decision: GateDecision) -> bool:
    """Whether "Later" can be offered for this decision.

    Dismissal remembers the latest version, so without a parseable one the
    prompt would come straight back on the next check.
    """
    if decision.status is not UpdateStatus.SOFT_UPDATE_AVAILABLE:
        return False
    try:
        parse_version(decision.latest_version)
    except InvalidVersionFormat:
        return False
    return True


# ── QThread Worker ───────────────────────────────────────────────────

# Import PyQt6 only when the worker is actually used (lazy import
# to keep GateChecker itself free of Qt dependency)

def _get_worker_class():
    """Lazy import to avoid PyQt6 at module level."""
    from PyQt6.QtCore import QThread, pyqtSignal

    class GateWorker(QThread):
        """Runs one GateChecker.check() off the UI thread."""

        decision_ready = pyqtSignal(object)    # GateDecision

        def __init__(self, checker: GateChecker, parent=None):
            super().__init__(parent)
            self._checker = checker

        def run(self):
            try:
                decision = self._checker.check()
            except Exception as e:
                # check() shouldn't raise; fail open if it does
                logger.error("Gate worker failed: %s", e)
                decision = GateDecision(
                    status=UpdateStatus.UP_TO_DATE,
                    installed_version=self._checker.installed_version,
                    error=str(e),
                )
            self.decision_ready.emit(decision)

    return GateWorker


# Module-level accessor
_GateWorkerClass = None


def get_gate_worker_class():
    """Get the GateWorker class (lazy-imported to avoid PyQt6 at import time)."""
    global _GateWorkerClass
    if _GateWorkerClass is None:
        _GateWorkerClass = _get_worker_class()
    return _GateWorkerClass
