from PyQt5 import QtWidgets

import app as entry
from tempo_timer.main_window import TimerWindow


def test_main_wrapper_logs_and_reports_unhandled_exception(qapp, log_dir, monkeypatch):
    shown = []

    def broken_main(argv):
        raise RuntimeError("boom")

    def fake_exec(box):
        shown.append((box.icon(), box.detailedText()))
        return 0

    monkeypatch.setattr(entry, "main", broken_main)
    monkeypatch.setattr(QtWidgets.QMessageBox, "exec_", fake_exec)

    assert entry.main_wrapper([]) == 1

    text = (log_dir / "last-run.txt").read_text(encoding="utf-8")
    assert "UNHANDLED EXCEPTION" in text
    assert "Traceback" in text
    assert "RuntimeError: boom" in text
    assert len(shown) == 1
    assert shown[0][0] == QtWidgets.QMessageBox.Critical
    assert "RuntimeError: boom" in shown[0][1]


def test_main_with_start_flag_begins_timing(qapp, log_dir, monkeypatch):
    windows = []

    def make_window(*args, **kwargs):
        window = TimerWindow(*args, **kwargs)
        windows.append(window)
        return window

    monkeypatch.setattr(entry, "TimerWindow", make_window)
    monkeypatch.setattr(QtWidgets.QApplication, "exec_", lambda *args: 0)

    assert entry.main(["app.py", "--start"]) == 0

    window = windows[0]
    assert window.timer.is_running()
    assert window.start_button.text() == "停止"
    assert "exit code=0" in (log_dir / "last-run.txt").read_text(encoding="utf-8")
    window.close()


def test_main_without_start_flag_stays_stopped(qapp, monkeypatch):
    windows = []

    def make_window(*args, **kwargs):
        window = TimerWindow(*args, **kwargs)
        windows.append(window)
        return window

    monkeypatch.setattr(entry, "TimerWindow", make_window)
    monkeypatch.setattr(QtWidgets.QApplication, "exec_", lambda *args: 0)

    assert entry.main(["app.py"]) == 0

    assert not windows[0].timer.is_running()
    windows[0].close()
