import pytest

from tilequest.rectmath import EMPTY_RECT, Circle, Grid, Point, Rect, rect_height, rect_width
from tilequest.tile import DynamicTile, StaticTile, TileSheetInfo, TileSource
from tilequest.tilemap import MapSpan, TileMap, grid_coord


def make_source(name="grass", frames=1, tile_type=0, obstacle=0):
    return TileSource(Grid(0, 0), TileSheetInfo("sheet", frames), tile_type, obstacle, name)


@pytest.fixture
def tilemap():
    return TileMap(4, 5, 50, "town")


def test_dimensions_follow_cells(tilemap):
    assert tilemap.width == tilemap.columns * tilemap.cell_length
    assert tilemap.height == tilemap.rows * tilemap.cell_length
    assert tilemap.map_rect == Rect(0, 0, tilemap.width, tilemap.height)
    assert tilemap.tile_count == 20


@pytest.mark.parametrize("rows,columns,cell", [(0, 3, 10), (3, 0, 10), (3, 3, 0)])
def test_invalid_dimensions_raise(rows, columns, cell):
    with pytest.raises(ValueError):
        TileMap(rows, columns, cell)


def test_grid_coord_size_and_origin():
    rect = grid_coord(Grid(2, 3), 10, 20)
    assert rect_width(rect) == 10
    assert rect_height(rect) == 20
    assert (rect.left, rect.top) == (3 * 10, 2 * 20)


def test_grid_rect_matches_grid_coord(tilemap):
    grid = Grid(1, 2)
    assert tilemap.grid_rect(grid) == grid_coord(grid, 50, 50)


def test_grid_rect_off_map_is_empty(tilemap):
    assert tilemap.grid_rect(Grid(10, 0)) == EMPTY_RECT


def test_span_rect_of_whole_map(tilemap):
    assert tilemap.span_rect(Grid(0, 0), Grid(3, 4)) == tilemap.map_rect


def test_set_tile_places_static_tile(tilemap):
    source = make_source()
    tile = tilemap.set_tile(Grid(1, 2), source)
    assert isinstance(tile, StaticTile)
    assert tilemap.get_tile(1, 2) is tile
    assert tile.rect == tilemap.grid_rect(Grid(1, 2))
    assert tile.grid == Grid(1, 2)


def test_set_tile_animated_source_gives_dynamic_tile(tilemap):
    tile = tilemap.set_tile(Grid(0, 0), make_source(frames=3))
    assert isinstance(tile, DynamicTile)
    assert tilemap.get_tile(0, 0) is tile
    assert tile.frame_index() == 0
    assert tile.rect == tilemap.grid_rect(Grid(0, 0))


def test_set_tile_same_source_keeps_tile(tilemap):
    source = make_source()
    first = tilemap.set_tile(Grid(0, 0), source)
    second = tilemap.set_tile(Grid(0, 0), source)
    assert first is second


def test_set_tile_with_attributes_replaces(tilemap):
    source = make_source()
    first = tilemap.set_tile(Grid(0, 0), source)
    second = tilemap.set_tile(Grid(0, 0), source, 2, 1)
    assert second is not first
    assert second.tile_type == 2
    assert second.obstacle_level == 1
    assert second.includes_obstacle is True


def test_set_tile_off_map_ignored(tilemap):
    assert tilemap.set_tile(Grid(4, 0), make_source()) is None
    assert all(tile is None for row in tilemap.tiles for tile in row)


def test_set_tile_without_source_raises(tilemap):
    with pytest.raises(ValueError):
        tilemap.set_tile(Grid(0, 0), None)


def test_get_tile_out_of_range(tilemap):
    assert tilemap.get_tile(4, 0) is None
    assert tilemap.get_tile(0, 5) is None
    assert tilemap.get_tile(-1, 0) is None


def test_set_row_and_column(tilemap):
    source = make_source()
    tilemap.set_row(2, source, 0, 0)
    tilemap.set_column(1, source, 0, 0)
    for row in range(tilemap.rows):
        for column in range(tilemap.columns):
            filled = row == 2 or column == 1
            assert (tilemap.get_tile(row, column) is not None) == filled


def test_set_row_out_of_range_does_nothing(tilemap):
    tilemap.set_row(9, make_source(), 0, 0)
    tilemap.set_column(9, make_source(), 0, 0)
    assert all(tile is None for row in tilemap.tiles for tile in row)


def test_set_edge_fills_border_only(tilemap):
    tilemap.set_edge(make_source(), 0, 1)
    placed = [t for row in tilemap.tiles for t in row if t is not None]
    assert len(placed) == 2 * tilemap.rows + 2 * tilemap.columns - 4
    assert tilemap.get_tile(1, 1) is None
    assert all(t.obstacle_level == 1 for t in placed)


def test_set_all(tilemap):
    source = make_source()
    tilemap.set_all(source, 3, 0)
    assert all(tile is not None and tile.tile_type == 3 for row in tilemap.tiles for tile in row)


def test_rect_span_clamps_to_map(tilemap):
    span = tilemap.rect_span(Rect(-100, -100, 10000, 10000))
    assert span == MapSpan(0, 0, tilemap.columns - 1, tilemap.rows - 1)


def test_rect_span_inside(tilemap):
    span = tilemap.rect_span(Rect(60, 10, 120, 110))
    assert (span.left, span.top) == (60 // 50, 10 // 50)
    assert (span.right, span.bottom) == (120 // 50, 110 // 50)


def test_circle_span_matches_bounding_rect(tilemap):
    circle = Circle(Point(100, 100), 30)
    assert tilemap.circle_span(circle) == tilemap.rect_span(Rect(70, 70, 130, 130))


def test_tile_at_point(tilemap):
    tile = tilemap.set_tile(Grid(1, 2), make_source())
    assert tilemap.tile_at_point(2 * 50 + 5, 1 * 50 + 5) is tile
    assert tilemap.tile_at_point(-1, 10) is None
    assert tilemap.tile_at_point(10000, 10) is None


def test_grid_at(tilemap):
    assert tilemap.grid_at(125, 60) == Grid(60 // 50, 125 // 50)
    assert tilemap.grid_at(-100, 0) is None
    assert tilemap.grid_at(0, 10000) is None


def test_mark_obstacle(tilemap):
    tilemap.set_all(make_source(), 0, 0)
    tilemap.mark_obstacle(Rect(0, 0, 10, 10))
    assert tilemap.get_tile(0, 0).includes_obstacle is True
    assert tilemap.get_tile(3, 4).includes_obstacle is False


def test_grid_center(tilemap):
    tile = tilemap.set_tile(Grid(1, 1), make_source())
    assert tilemap.grid_center(Grid(1, 1)) == tile.center()
    with pytest.raises(LookupError):
        tilemap.grid_center(Grid(0, 0))


def test_dumps_format(tilemap):
    tilemap.set_tile(Grid(1, 2), make_source("grass"))
    text = tilemap.dumps()
    assert text.startswith('*MAPNAME\n\t"town"\n{\n\t*CELLWIDTH\t50\n')
    assert '\t*TILENAME\t"grass"\n\t*TILEPOS\t1\t2\n' in text
    assert text.endswith("}\n}\n")


def test_save_writes_dumps(tilemap, tmp_path):
    tilemap.set_all(make_source(), 0, 0)
    path = tmp_path / "map.txt"
    tilemap.save(path)
    assert path.read_text(encoding="utf-8") == tilemap.dumps()