from tempo_timer import logger


def test_log_message_appends_timestamped_line(log_dir):
    logger.log_message("first")
    logger.log_message("second")

    lines = (log_dir / "last-run.txt").read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("] first")
    assert lines[1].endswith("] second")


def test_log_dir_falls_back_to_local_appdata(monkeypatch, tmp_path):
    monkeypatch.delenv("TEMPO_TIMER_LOG_DIR")
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))

    assert logger.log_dir() == str(tmp_path / "tempo-timer" / "logs")


def test_log_message_ignores_unwritable_directory(monkeypatch, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    monkeypatch.setenv("TEMPO_TIMER_LOG_DIR", str(blocker / "logs"))

    logger.log_message("dropped")
