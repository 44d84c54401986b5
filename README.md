# tilequest

This package holds the geometry and data for a tile-based role-playing game: maps, tiles, scene doorways, sprite frames, text layout and HUD bars. It draws nothing. Every function returns rectangles, objects or text, and a renderer of your choice does the drawing. It needs only the Python standard library (3.10 or later).

## Modules

- **`tilequest.rectmath`**
  - Shapes: `Point`, `Rect` (right and bottom are exclusive), `Circle` and `Grid`.
  - Helpers: `rect_width`, `rect_height`, `rect_oblique`, `rect_center`, `circle_in_rect`, `create_rect`, `scaled_rect`, `calculate_distance`, `same_rect` and `half_rect`.
  - `RectRelate` keeps a rectangle at a fixed offset from a moving point.
  - `RectNode` is a tree of named rectangles. `transform_to(rect)` fits the node onto `rect` and scales its children with it. It raises `ValueError` for a node with zero width or height.
- **`tilequest.tile`**
  - `TileSheetInfo` holds a sheet name and a frame count.
  - `TileSource` describes one kind of tile. It is animated (`multi`) when its sheet has more than one frame.
  - `StaticTile` and `DynamicTile`. `DynamicTile.update(now)` moves to the next frame every `rate` seconds (0.75 by default).
  - `create_tile` picks the right tile class.
- **`tilequest.tilemap`**
  - `TileMap(rows, columns, cell_length, name)` is a grid of square cells.
  - Filling cells: `set_tile`, `set_row`, `set_column`, `set_all`, `set_edge`. Cells off the map are ignored.
  - Lookups: `get_tile`, `tile_at_point`, `grid_at`, `grid_rect`, `span_rect`, `grid_center`, `rect_span`, `circle_span`.
  - `mark_obstacle(rect)` flags the tiles under `rect`.
  - `dumps()` returns the map as text and `save(path)` writes it to a file.
- **`tilequest.tilemapfile`**
  - `TileMapData.loads(text)` and `TileMapData.load(path)` read the text that `TileMap.dumps` writes.
  - `create_map(lookup)` rebuilds a `TileMap`. `lookup` is a mapping or a callable that turns a tile name into a `TileSource`. An unknown name raises `LookupError`.
- **`tilequest.tilefile`**
  - `parse_tile_data(text)` and `load_tile_data(path)` read `*TILEDATA` blocks.
  - They return a dict of tile name to `TileData`.
- **`tilequest.scenelink`**
  - `RectSceneLink` is a rectangular entrance in one scene that leads to an area of another.
  - It can be activated and deactivated.
  - Tests against rectangles: `is_touched_by` (overlap) and `involved_in` (containment).
  - `dest_position()` gives the arrival point: 50 px beyond the destination area, away from the side it was entered from.
  - `create_opposite(active)` builds the link back. A link made this way cannot make another opposite.
  - `LinkRegistry` keeps links in creation order. It has `add`, `remove`, `in_scene` and `clear_scene`.
- **`tilequest.textframe`**
  - `GlyphTable` is a font with one bitmap per glyph.
  - `Align` sets vertical alignment within a line.
  - `layout(text, rect)` places glyphs left to right. It skips characters the font lacks and stops once past the right edge.
  - `default_glyph_specs()` lists the game font's characters with their bitmap names.
- **`tilequest.textsheet`**
  - `TextSheet` is a fixed-grid character sheet starting at the space character.
  - `layout(text, max_chars_in_row, row_interval)` wraps text into rows.
  - `TextLabel` lays the text out again only when it changes.
- **`tilequest.statebar`**
  - `StateBar.layout(cur_hp, max_hp, cur_mp, max_mp)` returns the HP and MP bars as `BarPlacement`s, each with a screen rectangle and a source rectangle, scaled to the filled fraction.
  - `LittleHPBar` does the same for a small bar drawn in any rectangle.
- **`tilequest.sprites`**
  - `SequenceFrames` gives frame rectangles for a one-row animation strip.
  - `SpriteSheet` is a grid where each row is one animation.
- **`tilequest.tileeditor`**
  - `TileEditor` is a paged 10×10 palette of every tile on one sheet.
  - You select a tile with `select_at`. `set_mode`, `type_input`, `backspace` and `commit` edit the tile's name, type or obstacle level, or the sheet name.
  - Output: `format_tiles` / `save_tiles` write tile definitions, and `format_sheet` / `save_sheet` write the sheet description.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from tilequest.rectmath import Grid, Rect, rect_center
from tilequest.tile import TileSheetInfo, TileSource
from tilequest.tilemap import TileMap
from tilequest.tilemapfile import TileMapData

print(rect_center(Rect(0, 0, 100, 60)))   # Point(x=50, y=30)

grass = TileSource(Grid(0, 0), TileSheetInfo("basic"), name="grass")
town = TileMap(10, 12, 32, name="Town")
town.set_all(grass, 0, 0)
print(town.grid_at(70, 40))               # Grid(row=1, column=2)

data = TileMapData.loads(town.dumps())
copy = data.create_map({"grass": grass})
print(copy.get_tile(3, 4).name)           # grass
```

## What it does not do

- **Drawing and images.** Nothing here draws anything, loads bitmap files, or keeps time by itself. `DynamicTile.update` takes the current time as an argument.
- **Game state.** There is no game loop, no input handling, no camera, no objects or monsters, and no scene manager. `LinkRegistry` only stores links; it does not move anyone between scenes.
- **Tile sheet files.** `TileEditor.format_sheet` writes the tile sheet format, but the package has no reader for it.
- **Commands.** The package has no command-line program.