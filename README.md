# spacesim

A small space simulation. It opens a 1280×720 pygame window with a keyboard- and
mouse-driven main menu. Behind the menu is a data model of the universe made up of
sectors, quadrants, star systems, nav points, planets, bases, stars, black holes
and jump points, along with the factions that hold systems and the kinds of cargo
that can be traded.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Running

```
spacesim
```

Options:

- `--font PATH` – the glyph atlas image used to draw text
  (default `assets/fonts/ascii_font.png`, relative to the working directory).
  If the image cannot be loaded, a message is printed to stderr and the menu is
  drawn without text.

The main menu offers **New Game**, **Load Game**, **Settings** and **Quit**.

- Up and Down arrow keys move the highlight (wrapping around).
- Enter or keypad Enter chooses the highlighted option.
- Hovering the mouse over an option selects it; a left click chooses it.
- Escape or closing the window quits.

Text is drawn from a 16×16 atlas, one cell per byte value; each glyph is drawn
8×12 pixels and advanced 9 pixels, times the scale. The module
`spacesim.text_renderer` also offers `layout_text`, `glyph_cell` and `to_ndc` for
working out glyph placement without drawing.

## What it does not do yet

The menu is the whole game for now. Choosing **New Game** prints
`Starting new game...`, waits two seconds and returns to the menu; **Load Game**
and **Settings** do nothing. There is no flight, trading, saving or loading, and
`init_audio` / `shutdown_audio` only print a message – no sound is played. The
universe model is not loaded from or written to any file.

## Using the universe model

```python
from spacesim.factions import Faction
from spacesim.universe import NavPoint, Quadrant, Sector, System, Universe

gemini = Sector(name="Gemini")          # starts with three unnamed, empty quadrants
gemini.quadrants[0] = Quadrant(
    name="Troy",
    systems=[
        System(
            name="Troy",
            faction=Faction.CONFEDERATION,
            nav_points=[NavPoint("Nav 1", 0.0, 0.0, 0.0)],
        )
    ],
)

universe = Universe()
universe.add_sector(gemini)

universe.find_sector("Gemini")   # the first Sector with that name, or None
universe.print_hierarchy()       # Sector / Quadrant / System outline on stdout
```

`Universe.hierarchy_lines()` yields the same outline one line at a time, and
`print_hierarchy(file)` writes it to any text stream.

Objects inside a system live in `spacesim.space`: `Base` (with a `BaseType`),
`Planet`, `Star` (with a `StarType`), `Blackhole`, `JumpPoint`, `Mesh` and
`Terrain`. Locations and scales are checked for the right number of components
and a `ValueError` is raised otherwise. `spacesim.cargo.Cargo` lists the trade
goods.

## Running the tests

```
pytest
```