import random
from collections import Counter

import numpy as np
import pytest

from falling_blocks.game import Piece, PieceCatalog, TetrominoType, parse_shape

from conftest import ScriptedRandom


TEMPLATES = PieceCatalog().templates


def test_catalog_holds_seven_tetrominoes():
    assert len(PieceCatalog()) == 7
    assert [p.kind for p in TEMPLATES] == list(TetrominoType)
    assert all(p.count() == 4 for p in TEMPLATES)


@pytest.mark.parametrize("piece", TEMPLATES, ids=lambda p: p.kind.name)
def test_four_rotations_is_identity(piece):
    rotated = piece.copy()
    for _ in range(4):
        rotated.rotate()
    assert rotated == piece


@pytest.mark.parametrize("piece", TEMPLATES, ids=lambda p: p.kind.name)
def test_two_rotations_is_half_turn(piece):
    rotated = piece.rotated().rotated()
    assert np.array_equal(rotated.cells, piece.cells[::-1, ::-1])
    assert (rotated.height, rotated.width) == (piece.height, piece.width)


@pytest.mark.parametrize("piece", TEMPLATES, ids=lambda p: p.kind.name)
def test_rotation_swaps_dimensions_and_keeps_cells(piece):
    rotated = piece.rotated()
    assert (rotated.height, rotated.width) == (piece.width, piece.height)
    assert rotated.count() == piece.count()
    for r in range(rotated.height):
        for c in range(rotated.width):
            assert rotated.cells[r, c] == piece.cells[c, piece.width - r - 1]


def test_rotate_is_clockwise_when_row_zero_is_bottom():
    # drawn top row first: the L foot points right, after a clockwise turn it points down
    piece = Piece(parse_shape("#. #. ##"))
    piece.rotate()
    assert piece == Piece(parse_shape("### #.."))


def test_cells_are_read_only():
    piece = TEMPLATES[0].copy()
    with pytest.raises(ValueError):
        piece.cells[0, 0] = False


def test_created_piece_does_not_alias_template():
    catalog = PieceCatalog(rng=ScriptedRandom([2]))
    original = catalog.templates[2]
    piece = catalog.create()
    assert piece == original
    piece.rotate()
    assert catalog.create() == original


def test_create_uses_injected_random_source():
    rng = ScriptedRandom([1, 6, 0])
    catalog = PieceCatalog(rng=rng)
    kinds = [catalog.create().kind for _ in range(3)]
    assert kinds == [TetrominoType.I, TetrominoType.T, TetrominoType.O]
    assert rng.calls == 3


def test_selection_is_roughly_uniform():
    catalog = PieceCatalog(rng=random.Random(7))
    counts = Counter(catalog.create().kind for _ in range(7000))
    assert set(counts) == set(TetrominoType)
    assert all(800 < n < 1200 for n in counts.values())


def test_parse_shape_flips_to_bottom_first():
    cells = parse_shape("#.. ###")
    assert cells.tolist() == [[True, True, True], [True, False, False]]
    assert parse_shape("oo\noo").all()


@pytest.mark.parametrize("text", ["", "## #", "#x"])
def test_parse_shape_rejects_bad_literals(text):
    with pytest.raises(ValueError):
        parse_shape(text)


def test_custom_catalog_needs_shapes():
    with pytest.raises(ValueError):
        PieceCatalog(shapes=[])
