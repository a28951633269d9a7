"""Tests for BoardScene coordinate mapping and session wiring."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QPointF

from tilechess.core.types import E2, E4, H8
from tilechess.game.session import GameSession
from tilechess.ui.board.board_scene import BoardScene
from tilechess.ui.styles.theme import BoardTheme


@pytest.fixture
def scene(qapp: object) -> BoardScene:
    return BoardScene(GameSession(), tile=80)


def test_pos_to_square_maps_row_zero_to_top(scene: BoardScene) -> None:
    assert scene.pos_to_square(QPointF(1, 1)) == 0
    assert scene.pos_to_square(QPointF(8 * 80 - 1, 8 * 80 - 1)) == H8
    assert scene.pos_to_square(QPointF(4 * 80 + 5, 1 * 80 + 5)) == E2


def test_pos_to_square_outside_board(scene: BoardScene) -> None:
    assert scene.pos_to_square(QPointF(-1, 10)) is None
    assert scene.pos_to_square(QPointF(10, 8 * 80 + 1)) is None


def test_scene_rect_matches_tile_size(scene: BoardScene) -> None:
    rect = scene.sceneRect()
    assert rect.width() == 640
    assert rect.height() == 640


def test_pieces_drawn_for_every_occupied_square(scene: BoardScene) -> None:
    assert set(scene._piece_items) == set(range(16)) | set(range(48, 64))


def test_selection_highlights_follow_session(scene: BoardScene) -> None:
    scene.session.click(E2)
    # origin + two destinations
    assert len(scene._highlight_items) == 3

    scene.set_show_destinations(False)
    assert len(scene._highlight_items) == 1

    scene.session.cancel()
    assert scene._highlight_items == []


def test_move_resyncs_pieces(scene: BoardScene) -> None:
    scene.session.click(E2)
    scene.session.click(E4)
    assert E4 in scene._piece_items
    assert E2 not in scene._piece_items
    assert scene._highlight_items == []


def test_set_theme_redraws_squares(scene: BoardScene) -> None:
    scene.set_theme(BoardTheme.classic())
    assert len(scene._square_items) == 64
    assert BoardTheme.named("missing") == BoardTheme.meadow()


def test_reset_redraws_pieces(scene: BoardScene) -> None:
    scene.session.click(E2)
    scene.session.click(E4)
    scene.session.click(E4)
    scene.session.reset()
    assert E2 in scene._piece_items
    assert E4 not in scene._piece_items
    assert scene._highlight_items == []

    scene.session.reset("4K3/8/8/8/8/8/8/7k")
    assert set(scene._piece_items) == {4, H8}


def test_detach_stops_tracking_session(scene: BoardScene) -> None:
    session = scene.session
    scene.detach()
    assert session.events.on_selection_changed == []
    assert session.events.on_board_reset == []

    session.click(E2)
    session.click(E4)
    assert E2 in scene._piece_items
    assert scene._highlight_items == []
