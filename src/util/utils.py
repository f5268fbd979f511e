"""
どこで: `util.utils` の設定読み込み。
何を: プロジェクトルートの推定、YAML 設定（`configs/default.yaml` + `config.yaml`）の読込、
      `window:` 節の正規化。
なぜ: 設定ファイルの有無や破損で起動を止めず、Window の既定値へ静かにフォールバックするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILES = (Path("configs") / "default.yaml", Path("config.yaml"))
WINDOW_KEYS = ("width", "height", "fg", "bg")


def _read_yaml_mapping(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("config %s ignored: %s", path, e)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("config %s ignored: top level is %s", path, type(data).__name__)
        return {}
    return data


def _find_project_root(start: Path) -> Path:
    """`configs/` か `pyproject.toml` を持つ最も近い祖先を返す（無ければ `start` の 2 つ上）。"""
    here = start.resolve()
    for cand in (here, *here.parents):
        if (cand / "configs").is_dir() or (cand / "pyproject.toml").is_file():
            return cand
    return here.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """設定ファイルを順に読み、トップレベルのキー単位で後勝ちに合成した辞書を返す。

    - 読めないファイルは WARNING を記録して無視する（空辞書相当）。
    - `root` を渡すとルート探索を省略する（テスト用）。
    """
    base = root if root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for rel in CONFIG_FILES:
        path = base / rel
        if path.is_file():
            merged.update(_read_yaml_mapping(path))
    return merged


def window_section(config: Mapping[str, Any] | None = None) -> Dict[str, Any]:
    """設定から `window:` 節を取り出し、既知キー（width/height/fg/bg）だけを返す。

    `config` が None なら `load_config()` を読む。節が辞書でない場合は空辞書。
    """
    cfg = load_config() if config is None else config
    section = cfg.get("window")
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        logger.warning("config 'window' ignored: expected a mapping")
        return {}
    unknown = sorted(str(k) for k in section if k not in WINDOW_KEYS)
    if unknown:
        logger.warning("config 'window' has unknown keys: %s", ", ".join(unknown))
    return {k: section[k] for k in WINDOW_KEYS if k in section}


__all__ = ["load_config", "window_section"]
