from __future__ import annotations

import numpy as np
import pytest

from engine.core.rect import Rect
from engine.render.pixel_buffer import PixelBuffer

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def test_shape_and_clear() -> None:
    buf = PixelBuffer(8, 4)
    assert (buf.width, buf.height) == (8, 4)
    buf.clear(BLACK)
    assert buf.view().shape == (4, 8, 4)
    assert np.all(buf.view() == np.array(BLACK, dtype=np.uint8))


def test_negative_size_rejected() -> None:
    with pytest.raises(ValueError):
        PixelBuffer(-1, 4)


def test_view_is_read_only_and_not_a_copy() -> None:
    buf = PixelBuffer(4, 4)
    v = buf.view()
    with pytest.raises(ValueError):
        v[0, 0] = WHITE
    buf.set(1, 1, WHITE)
    assert tuple(v[1, 1]) == WHITE
    assert buf.pixel(1, 1) == WHITE
    buf.set(9, 9, BLACK)  # 範囲外は無視


def test_fill_is_clipped_to_bounds() -> None:
    buf = PixelBuffer(4, 4)
    buf.clear(BLACK)
    buf.fill(Rect(2, 2, 10, 10), WHITE)
    v = buf.view()
    assert np.all(v[2:, 2:] == np.array(WHITE, dtype=np.uint8))
    assert tuple(v[1, 1]) == BLACK


def test_border_leaves_interior() -> None:
    buf = PixelBuffer(6, 5)
    buf.clear(BLACK)
    buf.border(Rect(0, 0, 6, 5), WHITE)
    v = buf.view()
    assert tuple(v[0, 3]) == WHITE
    assert tuple(v[4, 3]) == WHITE
    assert tuple(v[2, 0]) == WHITE
    assert tuple(v[2, 5]) == WHITE
    assert tuple(v[2, 2]) == BLACK


def test_degenerate_border_draws_nothing_or_a_line() -> None:
    buf = PixelBuffer(6, 6)
    buf.clear(BLACK)
    buf.border(Rect(3, 3, 1, 1), WHITE)
    assert np.all(buf.view() == np.array(BLACK, dtype=np.uint8))
    buf.border(Rect(1, 0, 2, 6), WHITE)
    assert np.all(buf.view()[:, 1] == np.array(WHITE, dtype=np.uint8))


def test_blit_mask_respects_clip() -> None:
    buf = PixelBuffer(6, 6)
    buf.clear(BLACK)
    mask = np.ones((3, 3), dtype=bool)
    buf.blit_mask(0, 0, mask, WHITE, Rect(1, 1, 6, 6))
    v = buf.view()
    assert tuple(v[0, 0]) == BLACK
    assert tuple(v[1, 1]) == WHITE
    assert tuple(v[2, 2]) == WHITE
    assert tuple(v[3, 3]) == BLACK
