"""
どこで: `common` の型定義。
何を: RGBA 色などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

RGBA8 = tuple[int, int, int, int]
