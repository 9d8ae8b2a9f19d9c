from __future__ import annotations

from typing import Dict, List, Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from .display import ListEntry, display_list, hide_pages
from .logger import log_message
from .settings import SettingsStore
from .time_utils import format_time
from .timer import Clock, Timer


class TimerWindow(QtWidgets.QMainWindow):
    """タイマー表示・ラップ記録・設定画面を持つメインウィンドウ。"""

    def __init__(self, settings: Optional[SettingsStore] = None, clock: Optional[Clock] = None):
        super().__init__()
        self.setWindowTitle("tempo-timer")
        self.resize(420, 360)

        self.settings = settings or SettingsStore()
        self.timer = Timer(clock=clock, parent=self)
        self.elapsed_ms = 0
        self.laps: List[ListEntry] = []

        self._build_ui()
        self._connect_signals()
        self._apply_settings()
        self.show_page("timer")

    # UI構築
    def _build_ui(self) -> None:
        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        self.timer_nav_button = QtWidgets.QPushButton("タイマー")
        self.settings_nav_button = QtWidgets.QPushButton("設定")

        # content 直下のページを hide_pages() でまとめて隠す
        self.content = QtWidgets.QWidget()
        self.timer_page = QtWidgets.QWidget(self.content)
        self.settings_page = QtWidgets.QWidget(self.content)
        self.pages: Dict[str, QtWidgets.QWidget] = {
            "timer": self.timer_page,
            "settings": self.settings_page,
        }

        self.time_label = QtWidgets.QLabel(format_time(0))
        self.time_label.setAlignment(QtCore.Qt.AlignCenter)
        font = QtGui.QFont("Consolas")
        font.setStyleHint(QtGui.QFont.Monospace)
        font.setPointSize(28)
        self.time_label.setFont(font)

        self.start_button = QtWidgets.QPushButton("開始")
        self.lap_button = QtWidgets.QPushButton("ラップ")
        self.reset_button = QtWidgets.QPushButton("リセット")
        self.lap_view = QtWidgets.QListWidget()

        button_layout = QtWidgets.QHBoxLayout()
        button_layout.addWidget(self.start_button)
        button_layout.addWidget(self.lap_button)
        button_layout.addWidget(self.reset_button)

        timer_layout = QtWidgets.QVBoxLayout()
        timer_layout.addWidget(self.time_label)
        timer_layout.addLayout(button_layout)
        timer_layout.addWidget(self.lap_view)
        self.timer_page.setLayout(timer_layout)

        self.setting_boxes: Dict[str, QtWidgets.QCheckBox] = {}
        settings_layout = QtWidgets.QVBoxLayout()
        for setting_id, definition in self.settings.definitions.items():
            box = QtWidgets.QCheckBox(definition.label or setting_id)
            box.setChecked(bool(self.settings.get_value(setting_id)))
            self.setting_boxes[setting_id] = box
            settings_layout.addWidget(box)
        settings_layout.addStretch(1)
        self.settings_page.setLayout(settings_layout)

        content_layout = QtWidgets.QVBoxLayout()
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.addWidget(self.timer_page)
        content_layout.addWidget(self.settings_page)
        self.content.setLayout(content_layout)

        nav_layout = QtWidgets.QHBoxLayout()
        nav_layout.addWidget(self.timer_nav_button)
        nav_layout.addWidget(self.settings_nav_button)

        layout = QtWidgets.QVBoxLayout()
        layout.addLayout(nav_layout)
        layout.addWidget(self.content)
        central.setLayout(layout)

    def _connect_signals(self) -> None:
        self.timer_nav_button.clicked.connect(lambda: self.show_page("timer"))
        self.settings_nav_button.clicked.connect(lambda: self.show_page("settings"))
        self.start_button.clicked.connect(self.toggle_timer)
        self.lap_button.clicked.connect(self.record_lap)
        self.reset_button.clicked.connect(self.reset)
        for setting_id, box in self.setting_boxes.items():
            box.toggled.connect(
                lambda checked, sid=setting_id: self._on_setting_toggled(sid, checked)
            )

        self.timer.on_tick(self._on_tick)

    # ページ切り替え
    def show_page(self, name: str) -> None:
        hide_pages(self.content)
        self.pages[name].show()

    # タイマー操作
    def toggle_timer(self) -> None:
        self.timer.toggle()
        if self.timer.is_running():
            log_message(f"timer started at {format_time(self.elapsed_ms)}")
            self.start_button.setText("停止")
            return

        log_message(f"timer stopped at {format_time(self.elapsed_ms)}")
        self.start_button.setText("開始")
        if self.settings.get_value("reset_on_stop"):
            self.reset()

    def _on_tick(self, elapsed: int) -> None:
        self.elapsed_ms += elapsed
        self.time_label.setText(format_time(self.elapsed_ms))

    def record_lap(self) -> None:
        if not self.timer.is_running():
            return
        number = len(self.laps) + 1
        self.laps.append(ListEntry(f"ラップ {number}  {format_time(self.elapsed_ms)}", f"lap-{number}"))
        log_message(f"record_lap(): {self.laps[-1].text}")
        self._refresh_lap_view()

    def reset(self) -> None:
        self.timer.stop()
        self.start_button.setText("開始")
        self.elapsed_ms = 0
        self.laps = []
        self.time_label.setText(format_time(0))
        self._refresh_lap_view()
        log_message("timer reset")

    def _refresh_lap_view(self) -> None:
        display_list(self.lap_view, self.laps, self._select_lap)

    def _select_lap(self, item_id: str) -> None:
        for entry in self.laps:
            if entry.item_id == item_id:
                self.statusBar().showMessage(entry.text)
                return

    # 設定
    def _on_setting_toggled(self, setting_id: str, checked: bool) -> None:
        self.settings.set_value(setting_id, checked)
        log_message(f"setting changed: {setting_id}={checked}")
        self._apply_settings()

    def _apply_settings(self) -> None:
        self.lap_view.setVisible(self.settings.get_value("show_laps"))

        on_top = bool(self.settings.get_value("always_on_top"))
        if on_top != bool(self.windowFlags() & QtCore.Qt.WindowStaysOnTopHint):
            # フラグ変更でウィンドウが隠れるため表示し直す
            visible = self.isVisible()
            self.setWindowFlag(QtCore.Qt.WindowStaysOnTopHint, on_top)
            if visible:
                self.show()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self.timer.stop()
        self.start_button.setText("開始")
        super().closeEvent(event)
