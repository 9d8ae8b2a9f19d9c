import sys
from PyQt5 import QtCore, QtGui, QtWidgets


def apply_dark_theme(app: QtWidgets.QApplication) -> None:
    app.setStyle("Fusion")

    palette = QtGui.QPalette()
    base = QtGui.QColor(40, 40, 44)
    alt = QtGui.QColor(32, 32, 36)
    text = QtGui.QColor(225, 225, 225)
    hl = QtGui.QColor(230, 90, 70)

    palette.setColor(QtGui.QPalette.Window, base)
    palette.setColor(QtGui.QPalette.WindowText, text)
    palette.setColor(QtGui.QPalette.Base, QtGui.QColor(28, 28, 30))
    palette.setColor(QtGui.QPalette.AlternateBase, alt)
    palette.setColor(QtGui.QPalette.Text, text)
    palette.setColor(QtGui.QPalette.Button, alt)
    palette.setColor(QtGui.QPalette.ButtonText, text)
    palette.setColor(QtGui.QPalette.BrightText, QtCore.Qt.red)
    palette.setColor(QtGui.QPalette.Highlight, hl)
    palette.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor(255, 255, 255))
    app.setPalette(palette)

    # 経過時間ラベルは等幅・大きめで表示する
    app.setStyleSheet(
        """
        QLabel { color: #e1e1e1; }
        QPushButton { background: #2a2a2e; color: #e1e1e1; border: 1px solid #44444a; padding: 6px 14px; }
        QPushButton:hover { background: #34343a; }
        QPushButton:pressed { background: #24242a; }
        QListWidget { background: #1c1c1e; color: #bdbdbd; border: 1px solid #33333a; }
        QListWidget::item:selected { background: #e65a46; color: #ffffff; }
        QCheckBox { color: #e1e1e1; }
        QStatusBar { background: #2a2a2e; color: #e1e1e1; }
        """
    )


def apply_windows_app_user_model_id(app_id: str = "tempo-timer") -> None:
    if not sys.platform.startswith("win"):
        return
    try:
        import ctypes

        ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(app_id)
    except (AttributeError, OSError):
        pass
