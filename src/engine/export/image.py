"""
どこで: `engine.export.image`。
何を: `Window.end_frame()` が返したピクセル配列を PNG として保存する。
なぜ: ウィンドウを開かずに（テスト/CI 含む）フレームの見た目を確認できるようにするため。
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import numpy as np

from util.paths import ensure_screenshots_dir, unique_path

logger = logging.getLogger(__name__)


def save_png(pixels: np.ndarray, path: Path | None = None) -> Path:
    """RGBA8 配列（shape=(H, W, 4)、上端が先頭行）を PNG として保存する。

    Parameters
    ----------
    pixels : np.ndarray
        `end_frame()` の戻り値、またはそのコピー。
    path : Path | None
        出力先パス。None の場合は既定の `data/screenshot/` にタイムスタンプ名で保存。

    Returns
    -------
    Path
        保存先のファイルパス。
    """
    if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.dtype != np.uint8:
        raise ValueError(f"expected (H, W, 4) uint8 pixels, got {pixels.shape} {pixels.dtype}")
    height, width = int(pixels.shape[0]), int(pixels.shape[1])

    if path is None:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = unique_path(ensure_screenshots_dir() / f"{ts}_{width}x{height}.png")

    # 遅延インポート（ヘッドレス環境で engine 全体の import を妨げない）
    import pyglet.image

    data = np.ascontiguousarray(pixels).tobytes()
    try:
        # 負のピッチ = 先頭行が上端
        img = pyglet.image.ImageData(width, height, "RGBA", data, pitch=-width * 4)
        img.save(str(path))
    except Exception as e:
        raise RuntimeError(f"PNG 書き出しに失敗: {e}") from e
    logger.debug("saved %dx%d frame to %s", width, height, path)
    return Path(path)


__all__ = ["save_png"]
