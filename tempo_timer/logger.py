import os
from datetime import datetime


def log_dir() -> str:
    """ログの出力先ディレクトリ。``TEMPO_TIMER_LOG_DIR`` で上書きできる。"""
    override = os.getenv("TEMPO_TIMER_LOG_DIR")
    if override:
        return override
    local_appdata = os.getenv("LOCALAPPDATA")
    if local_appdata:
        return os.path.join(local_appdata, "tempo-timer", "logs")
    return os.path.join(os.path.expanduser("~"), ".local", "state", "tempo-timer", "logs")


def log_message(msg: str) -> None:
    """
    アプリケーションの動作ログをファイルに記録するグローバル関数
    """
    try:
        base = log_dir()
        os.makedirs(base, exist_ok=True)
        with open(os.path.join(base, "last-run.txt"), "a", encoding="utf-8", errors="ignore") as f:
            ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            f.write(f"[{ts}] {msg}\n")
    except OSError:
        pass
