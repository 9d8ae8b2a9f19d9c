"""リスト表示とページ切り替えの小さなヘルパー群。"""
from __future__ import annotations

from typing import Callable, Iterable, NamedTuple, Optional

from PyQt5 import QtCore, QtWidgets


ID_ROLE = QtCore.Qt.UserRole
CLASS_ROLE = QtCore.Qt.UserRole + 1


class ListEntry(NamedTuple):
    text: str
    item_id: str


def create_list_item(
    text: str, item_id: Optional[str] = None, css_class: Optional[str] = None
) -> QtWidgets.QListWidgetItem:
    """テキストを持つ項目を作る。ID とクラスは指定された場合のみ設定する。"""
    item = QtWidgets.QListWidgetItem(text)
    if item_id is not None:
        item.setData(ID_ROLE, item_id)
    if css_class is not None:
        item.setData(CLASS_ROLE, css_class)
    return item


def display_list(
    view: QtWidgets.QListWidget,
    entries: Iterable[ListEntry],
    on_click: Callable[[str], None],
) -> None:
    """一覧をクリアして ``entries`` の順に項目を並べ直す。"""
    view.clear()
    for entry in entries:
        view.addItem(create_list_item(entry.text, item_id=entry.item_id))

    try:
        view.itemClicked.disconnect()
    except TypeError:
        # まだ何も接続されていない
        pass
    view.itemClicked.connect(lambda item: on_click(item.data(ID_ROLE)))


def hide_pages(container: QtWidgets.QWidget) -> None:
    """コンテンツ領域の直下にあるページをすべて非表示にする。"""
    for page in container.findChildren(
        QtWidgets.QWidget, options=QtCore.Qt.FindDirectChildrenOnly
    ):
        page.hide()
