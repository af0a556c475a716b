"""Blocking gate screen for force update and maintenance."""

from PyQt6.QtCore import Qt, QUrl, pyqtSignal
from PyQt6.QtGui import QDesktopServices
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
)

from versiongate.core.models import GateDecision, UpdateStatus

FORCE_UPDATE_TEXT = (
    "This version of the app is no longer supported.\n"
    "Please update to continue."
)
MAINTENANCE_TEXT = (
    "We're performing scheduled maintenance.\n"
    "Please try again shortly."
)


class GateScreen(QDialog):
    """Modal screen the user can't dismiss: only update, retry, or quit."""

    retry_requested = pyqtSignal()
    quit_requested = pyqtSignal()

    def __init__(self, decision: GateDecision, parent=None):
        super().__init__(parent)
        self._decision = decision
        self.setModal(True)
        self.setMinimumWidth(420)
        # No close button in the title bar
        self.setWindowFlags(
            Qt.WindowType.Dialog
            | Qt.WindowType.CustomizeWindowHint
            | Qt.WindowType.WindowTitleHint
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(14)

        self._title = QLabel()
        self._title.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(self._title)

        self._body = QLabel()
        self._body.setWordWrap(True)
        layout.addWidget(self._body)

        buttons = QHBoxLayout()
        buttons.addStretch(1)

        self._quit_btn = QPushButton("Quit")
        self._quit_btn.clicked.connect(self.quit_requested.emit)
        buttons.addWidget(self._quit_btn)

        self._retry_btn = QPushButton("Retry")
        self._retry_btn.clicked.connect(self.retry_requested.emit)
        buttons.addWidget(self._retry_btn)

        self._store_btn = QPushButton("Open store")
        self._store_btn.setDefault(True)
        self._store_btn.clicked.connect(self._open_store)
        buttons.addWidget(self._store_btn)

        layout.addLayout(buttons)
        self.set_decision(decision)

    def set_decision(self, decision: GateDecision):
        """Refresh the screen in place (e.g. maintenance turned into force update)."""
        self._decision = decision
        if decision.status is UpdateStatus.MAINTENANCE_MODE:
            self.setWindowTitle("Maintenance")
            self._title.setText("Down for maintenance")
            self._body.setText(decision.maintenance_message or MAINTENANCE_TEXT)
            self._store_btn.setVisible(False)
            self._retry_btn.setVisible(True)
        else:
            self.setWindowTitle("Update required")
            self._title.setText("Update required")
            text = FORCE_UPDATE_TEXT
            if decision.latest_version:
                text += (f"\n\nInstalled: v{decision.installed_version}"
                         f"    Latest: v{decision.latest_version}")
            self._body.setText(text)
            self._store_btn.setVisible(True)
            self._store_btn.setEnabled(bool(decision.store_url))
            self._retry_btn.setVisible(False)

    def _open_store(self):
        if self._decision.store_url:
            QDesktopServices.openUrl(QUrl(self._decision.store_url))

    # --- No way out except the buttons ---

    def reject(self):
        # Escape key lands here
        pass

    def closeEvent(self, event):
        event.ignore()

    def release(self):
        """Close for real once the gate no longer blocks."""
        self.done(QDialog.DialogCode.Accepted)
