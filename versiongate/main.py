"""VersionGate: entry point."""

import sys
import os
import logging

from versiongate.branding import AppBranding
from versiongate.config.settings import AppSettings


def setup_logging(data_dir: str):
    """Configure logging to file and console."""
    log_dir = os.path.join(data_dir, 'logs')
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'versiongate.log')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(),
        ],
    )


def main():
    # High-DPI support
    os.environ.setdefault('QT_ENABLE_HIGHDPI_SCALING', '1')

    # Load settings early (before any GUI init)
    settings = AppSettings.load()
    settings.ensure_dirs()

    setup_logging(settings.data_dir)
    logger = logging.getLogger(__name__)
    logger.info("%s v%s starting (platform=%s)",
                AppBranding.APP_NAME, AppBranding.VERSION, settings.platform)
    if not settings.config_url:
        logger.warning("No gate config URL set; every check will fail open")

    from PyQt6.QtWidgets import QApplication
    from versiongate.ui.main_window import MainWindow

    app = QApplication(sys.argv)
    app.setApplicationName(AppBranding.APP_NAME)
    app.setOrganizationName(AppBranding.PUBLISHER)
    app.setStyleSheet(DARK_STYLE)

    window = MainWindow(settings)
    window.show()

    # App start check; resume and timer checks are wired in MainWindow
    window.check_now()

    exit_code = app.exec()

    logger.info("Goodbye")
    sys.exit(exit_code)


DARK_STYLE = """
QWidget {
    background-color: #1e1e1e;
    color: #cccccc;
    font-size: 13px;
}
QMainWindow {
    background-color: #1e1e1e;
}
QToolBar {
    background-color: #2d2d2d;
    border: none;
    spacing: 6px;
    padding: 4px;
}
QToolBar QToolButton {
    background-color: #3d3d3d;
    border: 1px solid #555;
    border-radius: 3px;
    padding: 4px 10px;
    color: #cccccc;
}
QToolBar QToolButton:hover {
    background-color: #4d4d4d;
}
QComboBox, QLineEdit, QSpinBox, QDoubleSpinBox {
    background-color: #3d3d3d;
    border: 1px solid #555;
    border-radius: 3px;
    padding: 4px;
    color: #cccccc;
}
QPushButton {
    background-color: #3d3d3d;
    border: 1px solid #555;
    border-radius: 3px;
    padding: 5px 15px;
    color: #cccccc;
}
QPushButton:hover {
    background-color: #4d4d4d;
}
QPushButton:pressed {
    background-color: #555;
}
QTabWidget::pane {
    border: 1px solid #333;
}
QTabBar::tab {
    background-color: #2d2d2d;
    border: 1px solid #333;
    padding: 6px 12px;
}
QTabBar::tab:selected {
    background-color: #3d3d3d;
}
QStatusBar {
    background-color: #2d2d2d;
    color: #888;
}
QDialog {
    background-color: #1e1e1e;
}
"""


if __name__ == '__main__':
    main()
