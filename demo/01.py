from __future__ import annotations

from api import Window, run

# 名前入力欄の内容はホスト側で保持する（エンジンは値を持たない）
name = ""
count = 0


def draw(ui: Window) -> None:
    """デモ描画関数（ボタンとテキスト入力）。"""
    global name, count
    ui.center().text("imui demo")
    ui.next_width(60)
    if ui.button("inc", "count+1").clicked():
        count += 1
    ui.same_line().text(f"count = {count}")
    name, st = ui.text_field("name", name)
    if st.focused():
        ui.text("typing...")
    ui.next_height(24).text(f"hello,\n{name or '(nobody)'}")


if __name__ == "__main__":
    run(Window.from_config(), draw, scale=4)
