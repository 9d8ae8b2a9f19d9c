"""壁時計の差分で経過時間を通知するタイマー。"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from PyQt5 import QtCore


TICK_INTERVAL_MS = 50

Clock = Callable[[], int]


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


@dataclass(frozen=True)
class Stopped:
    pass


@dataclass
class Running:
    last_sample: int
    handle: QtCore.QTimer


TimerState = Union[Stopped, Running]


class Timer(QtCore.QObject):
    """開始/停止/トグルできるタイマー。

    ``TICK_INTERVAL_MS`` ごとに時計を読み直し、前回のサンプルからの差分
    (ミリ秒) を ``tick`` シグナルで通知する。固定の周期を足し込むのでは
    なく毎回実測するため、イベントループが遅れても誤差が蓄積しない。
    """

    tick = QtCore.pyqtSignal(int)

    def __init__(self, clock: Optional[Clock] = None, parent: Optional[QtCore.QObject] = None):
        super().__init__(parent)
        self._clock: Clock = clock or monotonic_ms
        self._state: TimerState = Stopped()

    @property
    def state(self) -> TimerState:
        return self._state

    def is_running(self) -> bool:
        return isinstance(self._state, Running)

    def start(self) -> None:
        if self.is_running():
            return

        handle = QtCore.QTimer(self)
        handle.setTimerType(QtCore.Qt.PreciseTimer)
        handle.setInterval(TICK_INTERVAL_MS)
        handle.timeout.connect(self._on_timeout)
        # 最初の tick は start() 時点からの差分になる
        self._state = Running(last_sample=self._clock(), handle=handle)
        handle.start()

    def stop(self) -> None:
        state = self._state
        if not isinstance(state, Running):
            return

        state.handle.stop()
        state.handle.deleteLater()
        self._state = Stopped()

    def toggle(self) -> None:
        if self.is_running():
            self.stop()
        else:
            self.start()

    def on_tick(self, listener: Callable[[int], None]) -> Callable[[], None]:
        """``tick`` にリスナーを登録し、登録解除用の関数を返す。"""
        self.tick.connect(listener)
        connected = True

        def unregister() -> None:
            nonlocal connected
            if not connected:
                return
            connected = False
            try:
                self.tick.disconnect(listener)
            except TypeError:
                # 既に disconnect() 済み
                pass

        return unregister

    def _on_timeout(self) -> None:
        state = self._state
        if not isinstance(state, Running):
            return
        now = self._clock()
        elapsed = max(0, now - state.last_sample)
        state.last_sample = now
        self.tick.emit(elapsed)
