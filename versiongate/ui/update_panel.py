"""Soft-update notification bar.

Amber-styled bar with status label, "Update" and "Later" buttons. Only used
for SOFT_UPDATE_AVAILABLE; blocking statuses go to GateScreen.
"""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton

from versiongate.core.gate_checker import can_dismiss
from versiongate.core.models import GateDecision


class UpdatePanel(QWidget):
    """Dismissible update notification bar, shown when a soft update is available."""

    update_requested = pyqtSignal(str)      # store URL
    dismissed = pyqtSignal(str)             # latest version the user skipped

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedHeight(40)
        self.setVisible(False)
        self._decision: GateDecision | None = None

        self.setStyleSheet(
            "UpdatePanel { background-color: #451A03; "
            "border-bottom: 1px solid #92400E; }"
        )

        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 0, 14, 0)
        layout.setSpacing(12)

        self._label = QLabel("")
        self._label.setStyleSheet(
            "color: #FDE68A; font-weight: bold; font-size: 12px; "
            "background: transparent; border: none;"
        )
        layout.addWidget(self._label, 1)

        self._later_btn = QPushButton("Later")
        self._later_btn.setFixedSize(90, 28)
        self._later_btn.setStyleSheet(
            "QPushButton { background-color: transparent; color: #FDE68A; "
            "border: 1px solid #92400E; border-radius: 4px; } "
            "QPushButton:hover { background-color: #78350F; }"
        )
        self._later_btn.clicked.connect(self._on_later)
        layout.addWidget(self._later_btn)

        self._btn = QPushButton("Update")
        self._btn.setFixedSize(90, 28)
        self._btn.setStyleSheet(
            "QPushButton { background-color: #F59E0B; color: #FFFFFF; "
            "font-weight: bold; border: none; border-radius: 4px; } "
            "QPushButton:hover { background-color: #D97706; } "
            "QPushButton:pressed { background-color: #B45309; }"
        )
        self._btn.clicked.connect(self._on_update)
        layout.addWidget(self._btn)

    def show_update(self, decision: GateDecision):
        """Show the soft-update prompt for this decision."""
        self._decision = decision
        latest = f" v{decision.latest_version}" if decision.latest_version else ""
        self._label.setText(f"Update available:{latest}  (installed v{decision.installed_version})")
        self._btn.setEnabled(bool(decision.store_url))
        self._later_btn.setEnabled(can_dismiss(decision))
        self.setVisible(True)

    def hide_panel(self):
        self._decision = None
        self.setVisible(False)

    def _on_update(self):
        if self._decision and self._decision.store_url:
            self.update_requested.emit(self._decision.store_url)

    def _on_later(self):
        if self._decision and can_dismiss(self._decision):
            self.dismissed.emit(self._decision.latest_version)
        self.hide_panel()
