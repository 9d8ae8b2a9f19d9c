"""アプリ設定の定義と、既定値へフォールバックする設定ストア。"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


@dataclass(frozen=True)
class SettingDefinition:
    default_value: Any
    validator: Callable[[Any], bool] = _is_bool
    label: str = ""

    def is_valid(self, value: Any) -> bool:
        return self.validator(value)


SETTINGS: Dict[str, SettingDefinition] = {
    "always_on_top": SettingDefinition(False, label="常に手前に表示"),
    "show_laps": SettingDefinition(True, label="ラップ一覧を表示"),
    "reset_on_stop": SettingDefinition(False, label="停止時にリセット"),
}


@dataclass
class SettingsStore:
    """ユーザー設定を保持する。未設定・不正な値は定義の既定値を返す。"""

    definitions: Mapping[str, SettingDefinition] = field(default_factory=lambda: dict(SETTINGS))
    _user_settings: Dict[str, Any] = field(default_factory=dict)

    def _definition(self, setting_id: str) -> SettingDefinition:
        try:
            return self.definitions[setting_id]
        except KeyError:
            raise KeyError(f"unknown setting: {setting_id}") from None

    def set_value(self, setting_id: str, value: Any) -> None:
        self._definition(setting_id)
        self._user_settings[setting_id] = value

    def get_value(self, setting_id: str) -> Any:
        definition = self._definition(setting_id)
        value = self._user_settings.get(setting_id)
        if value is not None and definition.is_valid(value):
            return value
        return definition.default_value

    def is_default(self, setting_id: str) -> bool:
        definition = self._definition(setting_id)
        value = self._user_settings.get(setting_id)
        if value is None:
            return True
        default = definition.default_value
        # 0 と False のように型が違う値は既定値とみなさない
        return value is default or (type(value) is type(default) and value == default)
