# spaceout

A small 2D space game. You start at Earth in a small ship and fly out
into a parallax starfield. Watch your fuel and hull: thrust burns fuel,
and flying close to the Sun damages the hull.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Playing

    spaceout

Options:

| Option           | Meaning                                       | Default |
|------------------|-----------------------------------------------|---------|
| `--width N`      | Window width in pixels                        | 1280    |
| `--height N`     | Window height in pixels                       | 720     |
| `--fps N`        | Frame rate limit                              | 60      |
| `--seed N`       | Seed for the random starfield                 | random  |
| `--frames N`     | Stop after this many frames                   | none    |

A splash screen is shown for one second, then the main menu:

- **New Game** starts the flight.
- **Settings** leads to a display quality screen (Low, Medium, High) and
  a volume screen (0 to 9), each with a **Back** button.
- **Quit** ends the game. Closing the window does too.

Buttons are clicked with the left mouse button.

### Controls

| Key         | Action                                   |
|-------------|------------------------------------------|
| Left/Right  | Turn the ship                            |
| Up          | Throttle up (only while there is fuel; burns fuel) |
| Down        | Throttle down                            |

There is no top speed. The ship keeps moving at its current throttle
until you slow it down.

### Things to know

- The ship starts with 150 units of fuel. Within 150 units of Earth or
  100 units of the Moon the fuel is set to 1.0.
- Within 120 units of Earth or the Moon an action menu appears with a
  **Dock** button.
- Within 600 units of the Sun the hull loses 0.25 per second (it starts
  at 1.0 and stops at 0), and a `!` appears beside the Hull bar.
- The camera follows the ship and zooms out when you are more than 400
  units from Earth.
- The panel in the top right shows your speed and bars for fuel, hull,
  shields and weapons; each bar is drawn full at 1.0 (weapons at 10).

## What it does not do

- Pressing **Dock** switches to the docked state, but there is no docked
  scene: the window shows an empty screen and there is no way back.
- There is no sound. The volume setting is stored but nothing plays.
- The display quality setting is stored but does not change the drawing.
- Everything is drawn with simple shapes; no images or font files are
  loaded.
- Hull damage has no further consequence: an empty hull does not end the
  game.

## Using it as a library

The game logic runs without a window. Moving the ship one frame:

    from spaceout.spaceship import Key, move_spaceship, spawn_spaceship

    transform, ship = spawn_spaceship()
    move_spaceship(transform, ship, {Key.UP}, 1 / 60)
    print(ship.throttle, ship.fuel, transform.position())

`spaceout.game.Game` holds the whole game state, from the splash screen
through the menu to space:

    import random

    from spaceout.game import Game
    from spaceout.spaceship import Key

    game = Game(rng=random.Random(1))
    game.update(1.0)                      # the splash ends; now GameState.MENU
    screen = game.menu.screen()
    game.press_menu_button(screen.button("New Game"))   # GameState.SPACE
    game.update(1 / 60, {Key.UP})
    print(game.space.hud.speed_text)

`Game.press_dock()` presses the dock button while the action menu is
shown. The pieces are in their own modules: `spaceout.space` (starfield,
camera, refuelling, sun damage), `spaceout.bodies` (Earth, Moon, Sun),
`spaceout.action_menu`, `spaceout.hud`, `spaceout.menu`,
`spaceout.splash` and `spaceout.state` (game states and settings).