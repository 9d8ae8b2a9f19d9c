"""経過時間の表示用ヘルパー。"""


def format_time(milliseconds: int) -> str:
    """ミリ秒を ``HH:MM:SS.mmm`` 形式の文字列にする。

    時は 2 桁未満ならゼロ埋めし、それ以上は桁数をそのまま表示する
    (例: ``8640000000000000`` -> ``"2400000000:00:00.000"``)。
    負数や小数は想定しない。
    """

    seconds, ms = divmod(milliseconds, 1000)
    minutes, s = divmod(seconds, 60)
    h, m = divmod(minutes, 60)
    return f"{h:02d}:{m:02d}:{s:02d}.{ms:03d}"
