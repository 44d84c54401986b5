import pytest

from tilequest.rectmath import Grid
from tilequest.tile import TileSheetInfo, TileSource
from tilequest.tilemap import TileMap
from tilequest.tilemapfile import TileMapData, TileRef


def make_source(name):
    return TileSource(Grid(0, 0), TileSheetInfo("sheet"), 0, 0, name)


@pytest.fixture
def sources():
    return {"grass": make_source("grass"), "stone": make_source("stone")}


@pytest.fixture
def saved_map(sources):
    tilemap = TileMap(3, 4, 40, "coast")
    tilemap.set_tile(Grid(0, 1), sources["grass"])
    tilemap.set_tile(Grid(2, 3), sources["stone"])
    return tilemap


def test_loads_round_trip(saved_map):
    data = TileMapData.loads(saved_map.dumps())
    assert data.map_name == "coast"
    assert data.cell_width == saved_map.cell_length
    assert data.cell_height == saved_map.cell_length
    assert (data.rows, data.columns) == (saved_map.rows, saved_map.columns)
    assert data.tiles == [TileRef("grass", 0, 1), TileRef("stone", 2, 3)]


def test_create_map_places_tiles(saved_map, sources):
    data = TileMapData.loads(saved_map.dumps())
    rebuilt = data.create_map(sources)
    assert rebuilt.get_tile(0, 1).source is sources["grass"]
    assert rebuilt.get_tile(2, 3).source is sources["stone"]
    assert rebuilt.get_tile(1, 1) is None
    assert rebuilt.map_rect == saved_map.map_rect


def test_create_map_accepts_callable(saved_map, sources):
    data = TileMapData.loads(saved_map.dumps())
    rebuilt = data.create_map(sources.get)
    assert rebuilt.get_tile(0, 1).name == "grass"


def test_create_map_unknown_tile(saved_map):
    data = TileMapData.loads(saved_map.dumps())
    with pytest.raises(LookupError):
        data.create_map({"grass": make_source("grass")})


def test_load_from_file(saved_map, tmp_path):
    path = tmp_path / "coast.txt"
    saved_map.save(path)
    assert TileMapData.load(path) == TileMapData.loads(saved_map.dumps())


def test_empty_tile_block():
    data = TileMapData.loads(TileMap(2, 2, 10, "room").dumps())
    assert data.tiles == []
    assert (data.rows, data.columns) == (2, 2)


def test_missing_keyword_raises():
    with pytest.raises(ValueError):
        TileMapData.loads('*MAPNAME "room" { *CELLWIDTH 10 }')


def test_bad_number_raises():
    text = TileMap(2, 2, 10).dumps().replace("*MAPROW\t2", "*MAPROW\tmany")
    with pytest.raises(ValueError):
        TileMapData.loads(text)


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        TileMapData.load(tmp_path / "absent.txt")