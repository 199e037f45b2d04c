import pytest

from skyrunner.tilemap import (
    TileMap,
    load_map,
    pad_rows,
    parse_map,
    resolve_textures,
)


def test_pad_rows_gives_equal_widths_and_keeps_content():
    rows = ["ab", "abcd", ""]
    padded = pad_rows(rows)
    assert len({len(row) for row in padded}) == 1
    for original, row in zip(rows, padded):
        assert row.startswith(original)
        assert set(row[len(original):]) <= {"."}


def test_pad_rows_empty():
    assert pad_rows([]) == []


def test_resolve_removes_spaces():
    result = resolve_textures(["  X ", " R  "])
    assert " " not in "".join(result)


def test_dirt_under_open_cell_becomes_grass():
    result = resolve_textures(["..", "XX"])
    assert set(result[1]) == {"~"}


def test_dirt_in_top_row_stays_dirt():
    result = resolve_textures(["X"])
    assert result[0][0] == "X"


def test_dirt_under_dirt_stays_dirt():
    result = resolve_textures([".", "X", "X"])
    assert result[1][0] == "~"
    assert result[2][0] == "X"


def test_rock_followed_by_empty_marks_neighbour():
    result = resolve_textures(["R."])
    assert result[0][0] == "R"
    assert result[0][1] == "O"


def test_rock_followed_by_rock_or_dirt_becomes_small_rock():
    result = resolve_textures(["RR.", "RX."])
    assert result[0][0] == "r"
    assert result[0][1] == "R"
    assert result[0][2] == "O"
    assert result[1][0] == "r"


def test_end_marker_spreads_downwards():
    result = resolve_textures(["E", ".", " "])
    assert all(row == "E" for row in result)


def test_parse_map_with_and_without_trailing_newline():
    with_newline = parse_map("ab\nc\n")
    without = parse_map("ab\nc")
    assert with_newline.rows == without.rows
    assert with_newline.height == 2
    assert with_newline.width == 2


def test_parse_empty_map():
    tilemap = parse_map("")
    assert tilemap.height == 0
    assert tilemap.width == 0
    assert list(tilemap.visible_tiles()) == []


def test_tile_lookup_and_bounds():
    tilemap = parse_map("~X\n")
    assert tilemap.tile(0, 1) == "X"
    assert tilemap.tile(0, 2) == ""
    assert tilemap.tile(0, -1) == ""
    with pytest.raises(IndexError):
        tilemap.tile(1, 0)


def test_load_map_matches_parse(tmp_path):
    text = "....E\n..R..\nXXXXX\n"
    path = tmp_path / "level"
    path.write_text(text, encoding="utf-8")
    assert load_map(path).rows == parse_map(text).rows


def test_visible_tiles_single_dirt_block():
    assert list(parse_map("X\n").visible_tiles()) == [("X", 0, 0)]


def test_visible_tiles_skip_empty_cells_and_lift_rocks():
    tilemap = parse_map(".R.\n.~X\nXXX\n")
    tiles = list(tilemap.visible_tiles())
    drawable = sum(ch != "." for row in tilemap.rows for ch in row)
    assert len(tiles) == drawable
    for tile, _, y in tiles:
        assert tile != "."
        if tile in "ROr":
            assert y % 90 == 10
        else:
            assert y % 90 == 0


def test_visible_tiles_follow_offset():
    still = TileMap(parse_map("~R\nXX\n").rows)
    moved = TileMap(still.rows, offset=12.5)
    for (tile_a, x_a, y_a), (tile_b, x_b, y_b) in zip(
        still.visible_tiles(), moved.visible_tiles()
    ):
        assert tile_a == tile_b
        assert y_a == y_b
        assert x_b == pytest.approx(x_a - 12.5)