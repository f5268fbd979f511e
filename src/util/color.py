"""
どこで: `util.color`。
何を: 色指定の正規化（名前, Hex, 0–1 float, 0–255 int）を RGBA8 へ一元化。
なぜ: Window の前景/背景色・設定ファイル・PNG 出力で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence

from common.types import RGBA8

NAMED_COLORS: dict[str, RGBA8] = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "red": (255, 0, 0, 255),
    "green": (0, 255, 0, 255),
    "blue": (0, 0, 255, 255),
    "gray": (128, 128, 128, 255),
    "transparent": (0, 0, 0, 0),
}


def _clamp_u8(x: int) -> int:
    return 0 if x < 0 else 255 if x > 255 else int(x)


def parse_hex_color_str(s: str) -> RGBA8:
    """Hex 文字列から RGBA(0–255) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r, g, b, a)


def _from_sequence(seq: Sequence[object]) -> RGBA8:
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    # float を含む場合は 0–1、すべて int なら 0–255 とみなす
    if any(isinstance(v, float) for v in seq):
        try:
            vals = [float(v) for v in seq]  # type: ignore[arg-type]
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid color tuple/list: {seq!r}") from e
        if len(vals) == 3:
            vals.append(1.0)
        r, g, b, a = (_clamp_u8(int(round(v * 255))) for v in vals)
        return (r, g, b, a)
    try:
        ivals = [int(v) for v in seq]  # type: ignore[call-overload]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {seq!r}") from e
    if len(ivals) == 3:
        ivals.append(255)
    r, g, b, a = (_clamp_u8(v) for v in ivals)
    return (r, g, b, a)


def to_u8_rgba(value: object) -> RGBA8:
    """色を RGBA(0–255) へ正規化する。

    - 受理: 色名（`NAMED_COLORS`）, Hex 文字列, (r,g,b[,a])
    - タプル要素に float を含めば 0–1、すべて int なら 0–255 として解釈
    - 範囲外の値は丸める
    """
    if isinstance(value, str):
        named = NAMED_COLORS.get(value.strip().lower())
        if named is not None:
            return named
        return parse_hex_color_str(value)
    if isinstance(value, (list, tuple)):
        return _from_sequence(value)
    raise ValueError(f"unsupported color type: {type(value)!r}")


__all__ = [
    "NAMED_COLORS",
    "parse_hex_color_str",
    "to_u8_rgba",
]
