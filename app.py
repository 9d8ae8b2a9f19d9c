import os
import sys
import traceback
from datetime import datetime
from typing import List

from PyQt5 import QtWidgets, QtCore

from tempo_timer.logger import log_dir, log_message
from tempo_timer.theme import apply_dark_theme, apply_windows_app_user_model_id
from tempo_timer.main_window import TimerWindow

# ログメッセージにPIDとミリ秒付きタイムスタンプを追加する
original_log_message = log_message

def log_message(msg):
    pid = os.getpid()
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    original_log_message(f"[{timestamp}][PID:{pid:5d}] {msg}")

def show_fatal_error(detailed_text: str) -> None:
    """致命的なエラーをダイアログで通知する。QApplication が無ければ作る。"""
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

    msg_box = QtWidgets.QMessageBox()
    msg_box.setIcon(QtWidgets.QMessageBox.Critical)
    msg_box.setWindowTitle(f"{app.applicationName() or 'tempo-timer'} - エラー")
    msg_box.setText("計測中に予期せぬエラーが発生したため終了します。")
    msg_box.setInformativeText(f"ログ: {os.path.join(log_dir(), 'last-run.txt')}")
    msg_box.setDetailedText(detailed_text)
    msg_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
    msg_box.exec_()

def main_wrapper(argv: List[str]) -> int:
    try:
        return main(argv)
    except Exception:
        detailed_text = traceback.format_exc()
        log_message("!!!!!!!!!! UNHANDLED EXCEPTION !!!!!!!!!!")
        log_message(detailed_text)
        show_fatal_error(detailed_text)
        return 1

def main(argv: List[str]) -> int:
    # --- 基本的なアプリケーション設定 ---
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(argv)
    QtCore.QCoreApplication.setOrganizationName("tempo")
    QtCore.QCoreApplication.setApplicationName("tempo-timer")
    apply_dark_theme(app)
    apply_windows_app_user_model_id("tempo-timer")

    log_message("startup")
    window = TimerWindow()
    window.show()

    # --start を付けると起動直後から計測する
    if "--start" in argv[1:]:
        window.toggle_timer()

    code = app.exec_()
    log_message(f"exit code={code}")
    return code

def run() -> None:
    sys.exit(main_wrapper(sys.argv))

if __name__ == "__main__":
    run()
