import pytest

from tilequest.tilefile import TileData, load_tile_data, parse_tile_data

SAMPLE = """*TILEDATA
{
\t*TILENAME\t"grass0"
\t*REFTILESHEET\t"grass"
\t*REFPOSITION\t0\t0
\t*TILETYPE\t1
\t*TILEOBSTACLE\t0
}
*TILEDATA
{
\t*TILENAME\t"wall"
\t*REFTILESHEET\t"stone"
\t*REFPOSITION\t3\t4
\t*TILETYPE\t2
\t*TILEOBSTACLE\t5
}
"""


def test_parse_sample():
    tiles = parse_tile_data(SAMPLE)
    assert list(tiles) == ["grass0", "wall"]
    assert tiles["wall"] == TileData("wall", "stone", 3, 4, 2, 5)
    assert tiles["grass0"].ref_tile_sheet == "grass"


def test_default_names():
    data = TileData()
    assert data.tile_name == "_UnKnown_"
    assert data.ref_tile_sheet == "_UnKnown_"


def test_empty_text_gives_nothing():
    assert parse_tile_data("") == {}


def test_missing_keyword_raises():
    text = '*TILEDATA { *TILENAME "a" *REFTILESHEET "s" *REFPOSITION 1 2 }'
    with pytest.raises(ValueError):
        parse_tile_data(text)


def test_bad_number_raises():
    text = (
        '*TILEDATA { *TILENAME "a" *REFTILESHEET "s" *REFPOSITION x 2 '
        "*TILETYPE 0 *TILEOBSTACLE 0 }"
    )
    with pytest.raises(ValueError):
        parse_tile_data(text)


def test_unclosed_block_raises():
    with pytest.raises(ValueError):
        parse_tile_data('*TILEDATA { *TILENAME "a"')


def test_load_from_file(tmp_path):
    path = tmp_path / "tiles.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_tile_data(path) == parse_tile_data(SAMPLE)