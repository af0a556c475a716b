"""Main application window: hosts app content and enforces the version gate."""

import logging

from PyQt6.QtCore import Qt, QTimer, QUrl
from PyQt6.QtGui import QAction, QDesktopServices
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QToolBar, QStatusBar,
    QLabel, QApplication,
)

from versiongate.branding import AppBranding
from versiongate.config.settings import AppSettings
from versiongate.core.cache import GateCache
from versiongate.core.gate_checker import GateChecker, get_gate_worker_class, should_prompt
from versiongate.core.models import GateDecision, UpdateStatus
from versiongate.ui.gate_screen import GateScreen
from versiongate.ui.settings_dialog import SettingsDialog
from versiongate.ui.update_panel import UpdatePanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """VersionGate main window."""

    def __init__(self, settings: AppSettings):
        super().__init__()
        self._settings = settings
        self._worker = None
        self._gate_screen: GateScreen | None = None
        self._shutting_down = False

        self._setup_ui()
        self._setup_timers()

        # Re-check when the user comes back to the app
        QApplication.instance().applicationStateChanged.connect(self._on_app_state_changed)

    def _setup_ui(self):
        self.setWindowTitle(AppBranding.window_title())
        self.setMinimumSize(640, 420)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)

        layout.addWidget(self._create_brand_header())

        self._update_panel = UpdatePanel()
        self._update_panel.update_requested.connect(self._open_store)
        self._update_panel.dismissed.connect(self._on_update_dismissed)
        layout.addWidget(self._update_panel)

        self._toolbar = self._create_toolbar()
        self.addToolBar(self._toolbar)

        content = QLabel("Your app content goes here.")
        content.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(content, 1)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_label = QLabel("Ready")
        self._status_bar.addWidget(self._status_label, 1)

    def _create_brand_header(self) -> QWidget:
        header = QWidget()
        header.setFixedHeight(56)
        header.setStyleSheet(
            "QWidget { background-color: #27272A; border-bottom: 1px solid #3F3F46; }"
        )
        h_layout = QHBoxLayout(header)
        h_layout.setContentsMargins(16, 8, 16, 8)

        name_label = QLabel(AppBranding.APP_NAME)
        name_label.setStyleSheet(
            "font-size: 18px; font-weight: bold; color: #3B82F6; background: transparent; border: none;"
        )
        h_layout.addWidget(name_label)

        ver_label = QLabel(f"v{AppBranding.VERSION}")
        ver_label.setStyleSheet(
            "font-size: 12px; color: #71717A; margin-left: 8px; background: transparent; border: none;"
        )
        h_layout.addWidget(ver_label)

        h_layout.addStretch()
        return header

    def _create_toolbar(self) -> QToolBar:
        toolbar = QToolBar("Main")
        toolbar.setMovable(False)

        self._act_check = QAction("\u21BB Check now", self)
        self._act_check.setShortcut("F5")
        self._act_check.triggered.connect(self.check_now)
        toolbar.addAction(self._act_check)

        toolbar.addSeparator()

        self._act_settings = QAction("\u2699 Settings", self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        toolbar.addAction(self._act_settings)

        toolbar.addSeparator()

        self._act_quit = QAction("\u2B1B Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self._quit_app)
        toolbar.addAction(self._act_quit)

        return toolbar

    def _setup_timers(self):
        self._check_timer = QTimer(self)
        self._check_timer.timeout.connect(self.check_now)
        self._apply_check_interval()

    def _apply_check_interval(self):
        minutes = self._settings.check_interval_minutes
        if minutes > 0:
            self._check_timer.start(minutes * 60 * 1000)
        else:
            self._check_timer.stop()

    # --- Gate check ---

    def check_now(self):
        """Start a background gate check unless one is already running."""
        if self._shutting_down:
            return
        if self._worker is not None and self._worker.isRunning():
            return

        checker = GateChecker(
            config_url=self._settings.config_url,
            platform=self._settings.platform,
            installed_version=AppBranding.VERSION,
            cache=GateCache(self._settings.cache_path),
            timeout=self._settings.request_timeout,
        )
        worker_cls = get_gate_worker_class()
        self._worker = worker_cls(checker, self)
        self._worker.decision_ready.connect(self._on_decision)
        self._status_label.setText("Checking for updates...")
        self._worker.start()

    def _on_decision(self, decision: GateDecision):
        if self._shutting_down:
            return

        if decision.from_cache:
            self._status_label.setText("Using last known update info")
        elif decision.error:
            self._status_label.setText("Update check unavailable")
        else:
            self._status_label.setText("Ready")

        if decision.blocks_user:
            self._update_panel.hide_panel()
            self._show_gate(decision)
            return

        self._release_gate()
        if (decision.status is UpdateStatus.SOFT_UPDATE_AVAILABLE
                and should_prompt(decision, self._settings.dismissed_version)):
            self._update_panel.show_update(decision)
        else:
            self._update_panel.hide_panel()

    def _show_gate(self, decision: GateDecision):
        if self._gate_screen is None:
            self._gate_screen = GateScreen(decision, self)
            self._gate_screen.retry_requested.connect(self.check_now)
            self._gate_screen.quit_requested.connect(self._quit_app)
            self._gate_screen.open()
        else:
            self._gate_screen.set_decision(decision)

    def _release_gate(self):
        if self._gate_screen is not None:
            self._gate_screen.release()
            self._gate_screen.deleteLater()
            self._gate_screen = None

    def _on_app_state_changed(self, state):
        if state == Qt.ApplicationState.ApplicationActive and self._settings.check_on_resume:
            self.check_now()

    # --- Actions ---

    def _open_store(self, url: str):
        QDesktopServices.openUrl(QUrl(url))

    def _on_update_dismissed(self, version: str):
        self._settings.dismissed_version = version
        self._settings.save()

    def _on_settings(self):
        source = (self._settings.config_url, self._settings.platform)
        dialog = SettingsDialog(self, self._settings)
        if dialog.exec():
            self._settings = dialog.get_settings()
            if (self._settings.config_url, self._settings.platform) != source:
                # Floors cached from the old source no longer apply
                GateCache(self._settings.cache_path).clear()
                self._settings.dismissed_version = ""
            self._settings.save()
            self._apply_check_interval()
            self.check_now()

    def _quit_app(self):
        """Stop timers, wait for a running check, save, quit."""
        if self._shutting_down:
            return
        self._shutting_down = True
        self._check_timer.stop()

        if self._worker is not None and self._worker.isRunning():
            self._worker.wait(int(self._settings.request_timeout * 1000) + 1000)

        try:
            self._settings.save()
        except Exception as e:
            logger.error("Error during shutdown: %s", e)

        QApplication.quit()

    def closeEvent(self, event):
        event.accept()
        self._quit_app()
