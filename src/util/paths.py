"""
どこで: `util.paths`。
何を: 画像保存先ディレクトリの生成と解決ユーティリティを提供する。
なぜ: ホスト/エクスポートから簡潔に保存先を扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from .utils import _find_project_root


def ensure_screenshots_dir(root: Path | None = None) -> Path:
    """スクリーンショット出力先 `data/screenshot/` を作成して返す。

    - 既定ではプロジェクトルート直下の `data/screenshot/` に作成する。
    - 既存の場合もそのまま Path を返す。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    base = root if root is not None else _find_project_root(Path(__file__).parent)
    out = base / "data" / "screenshot"
    out.mkdir(parents=True, exist_ok=True)
    return out


def unique_path(path: Path) -> Path:
    """`path` が既に存在すれば `stem-1.ext`, `stem-2.ext`, ... の空き名を返す。"""
    if not path.exists():
        return path
    stem = path.stem
    suffix = path.suffix
    parent = path.parent
    i = 1
    while True:
        cand = parent / f"{stem}-{i}{suffix}"
        if not cand.exists():
            return cand
        i += 1
