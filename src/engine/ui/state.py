"""
どこで: `engine.ui` のウィジェット状態ストア。
何を: ウィジェット ID をキーにフレームをまたいで保持する値（初回参照時に既定値で生成）。
なぜ: 即時モードでもテキストフィールドのキャレット等、ウィジェット固有の状態を持てるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from engine.core.errors import WidgetStateTypeError

T = TypeVar("T")


@dataclass
class TextFieldState:
    """テキストフィールドのキャレット位置（-1 はまだフォーカスを得ていない）。"""

    cursor: int = -1


class WidgetStateStore:
    """ID → 任意値。`clear()` 以外では消えない。"""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, widget_id: object) -> bool:
        return widget_id in self._values

    def get(self, widget_id: str, default: Any) -> Any:
        """登録済みの値を返す。未登録なら `default` を登録して返す。"""
        return self._values.setdefault(widget_id, default)

    def get_as(self, widget_id: str, cls: type[T], factory: Callable[[], T]) -> T:
        """型付きで取得する。未登録なら `factory()` で生成して登録する。

        Raises
        ------
        WidgetStateTypeError
            登録済みの値が `cls` のインスタンスでない場合。
        """
        if widget_id not in self._values:
            self._values[widget_id] = factory()
        value = self._values[widget_id]
        if not isinstance(value, cls):
            raise WidgetStateTypeError(
                f"state for '{widget_id}' is {type(value).__name__}, expected {cls.__name__}"
            )
        return value

    def clear(self) -> None:
        self._values.clear()


__all__ = ["TextFieldState", "WidgetStateStore"]
