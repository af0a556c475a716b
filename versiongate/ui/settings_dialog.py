"""Settings dialog."""

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox,
    QCheckBox, QDialogButtonBox, QTabWidget, QWidget, QFormLayout,
)

from versiongate.config.settings import AppSettings

PLATFORMS = ['windows', 'macos', 'linux', 'ios', 'android']


class SettingsDialog(QDialog):
    """Application settings dialog with tabs."""

    def __init__(self, parent=None, settings: AppSettings = None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(450)
        self._settings = settings or AppSettings()

        layout = QVBoxLayout(self)

        tabs = QTabWidget()
        tabs.addTab(self._create_source_tab(), "Source")
        tabs.addTab(self._create_schedule_tab(), "Schedule")
        layout.addWidget(tabs)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _create_source_tab(self) -> QWidget:
        widget = QWidget()
        form = QFormLayout(widget)

        self._url_edit = QLineEdit(self._settings.config_url)
        self._url_edit.setPlaceholderText("https://example.com/version-gate.json")
        form.addRow("Gate config URL:", self._url_edit)

        self._platform_combo = QComboBox()
        self._platform_combo.setEditable(True)
        self._platform_combo.addItems(PLATFORMS)
        self._platform_combo.setCurrentText(self._settings.platform)
        form.addRow("Platform:", self._platform_combo)

        self._timeout_spin = QDoubleSpinBox()
        self._timeout_spin.setRange(1.0, 30.0)
        self._timeout_spin.setSingleStep(0.5)
        self._timeout_spin.setSuffix(" s")
        self._timeout_spin.setValue(self._settings.request_timeout)
        form.addRow("Request timeout:", self._timeout_spin)

        return widget

    def _create_schedule_tab(self) -> QWidget:
        widget = QWidget()
        form = QFormLayout(widget)

        # Periodic check (minutes, 0 = off)
        self._interval_spin = QSpinBox()
        self._interval_spin.setRange(0, 24 * 60)
        self._interval_spin.setSuffix(" min")
        self._interval_spin.setSpecialValueText("Off")
        self._interval_spin.setValue(self._settings.check_interval_minutes)
        form.addRow("Check every:", self._interval_spin)

        self._resume_check = QCheckBox("Check again when the app is reactivated")
        self._resume_check.setChecked(self._settings.check_on_resume)
        form.addRow(self._resume_check)

        return widget

    def get_settings(self) -> AppSettings:
        """Return updated settings."""
        self._settings.config_url = self._url_edit.text().strip()
        self._settings.platform = self._platform_combo.currentText().strip()
        self._settings.request_timeout = self._timeout_spin.value()
        self._settings.check_interval_minutes = self._interval_spin.value()
        self._settings.check_on_resume = self._resume_check.isChecked()
        return self._settings
