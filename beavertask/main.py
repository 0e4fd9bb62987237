from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtGui import QColor, QFont, QPalette
from PySide6.QtWidgets import QApplication, QStyleFactory

from beavertask.config import PROJECT_ROOT
from beavertask.infra.logging import setup_logging
from beavertask.ui.main_window import MainWindow


def _apply_dark_palette(app: QApplication) -> None:
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor("#15171C"))
    palette.setColor(QPalette.WindowText, QColor("#F2F2F2"))
    palette.setColor(QPalette.Base, QColor("#1D2027"))
    palette.setColor(QPalette.AlternateBase, QColor("#242833"))
    palette.setColor(QPalette.Text, QColor("#F2F2F2"))
    palette.setColor(QPalette.Button, QColor("#242833"))
    palette.setColor(QPalette.ButtonText, QColor("#F2F2F2"))
    palette.setColor(QPalette.ToolTipBase, QColor("#242833"))
    palette.setColor(QPalette.ToolTipText, QColor("#F2F2F2"))
    palette.setColor(QPalette.Highlight, QColor("#F89422"))
    palette.setColor(QPalette.HighlightedText, QColor("#15171C"))
    app.setPalette(palette)


def _find_qss_path() -> Path | None:
    candidates = [
        Path(__file__).resolve().parent / "ui" / "styles.qss",
        PROJECT_ROOT / "beavertask" / "ui" / "styles.qss",
        Path.cwd() / "beavertask" / "ui" / "styles.qss",
    ]

    if getattr(sys, "frozen", False):
        exe_root = Path(sys.executable).resolve().parent
        candidates.append(exe_root / "ui" / "styles.qss")
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            candidates.append(Path(meipass) / "ui" / "styles.qss")

    for path in candidates:
        if path.exists():
            return path
    return None


def load_styles(app: QApplication) -> None:
    qss_path = _find_qss_path()
    if not qss_path:
        return
    app.setStyleSheet(qss_path.read_text(encoding="utf-8"))


def main() -> None:
    setup_logging("beavertask")

    app = QApplication(sys.argv)
    app.setStyle(QStyleFactory.create("Fusion"))
    _apply_dark_palette(app)
    app.setFont(QFont("Inter", 10))
    load_styles(app)

    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
