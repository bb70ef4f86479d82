# hatman

The game-state core of a small 2D metroidvania. It is plain Python with no
third-party runtime dependencies, and it has no graphics or sound library
behind it.

| Module | What it holds |
| --- | --- |
| `hatman.tags` | Names in the form `[prefix]{suffix}`, as used by Tiled layers and properties |
| `hatman.flags` | `Flags`, a set of persistent story flags with `!flag` negation |
| `hatman.emit` | `EmitStorage`, short-lived named signals with lifetimes |
| `hatman.timer` | `Timer` and `TimerController`, millisecond countdowns |
| `hatman.controls` | The `Key` and `MouseButton` enums, `key_name`, `button_name` and the default `Controls` bindings |
| `hatman.inputs` | `Input`, the pressed, released and held state of keys and buttons, plus the mouse position |
| `hatman.audio` | `Audio`, a sound-effect cache and music cross-fading between tracks |
| `hatman.saver` | `Saver` for JSON save files, and `Config` with `config_create`, `config_create_default`, `config_parse` and `window_mode_from_string` |
| `hatman.launch_info` | `WindowMode` and `LaunchInfo` |
| `hatman.level_map` | Tile grids (`LevelMap`), tileset lookup and tile-layer parsing |
| `hatman.level` | Parsing Tiled JSON maps into tiles, entity spawns and scripted areas |
| `hatman.game` | `Game`, which handles requests for menus, level changes and exit, with fade transitions |

## Requirements

Python 3.10 or later.

## Examples

### Tags

```python
from hatman.tags import make_tag, get_prefix, get_suffix, contains_prefix

tag = make_tag("script", "hint")      # "[script]{hint}"
get_prefix(tag)                       # "script"
get_suffix(tag)                       # "hint"
contains_prefix(tag, "script")        # True
```

### Flags

A flag that starts with `!` is checked in negated form.

```python
from hatman.flags import Flags

flags = Flags()
flags.add("boss_defeated")
flags.check("boss_defeated")    # True
flags.check("!boss_defeated")   # False
flags.remove_containing_substring("boss")
flags.check("boss_defeated")    # False
```

### Emits

Each emit has a lifetime in milliseconds:

- A positive lifetime expires once more than that much time has passed.
- A lifetime of `0` is removed on the update after it becomes present.
- A negative lifetime never expires.

An emit you add is queued and becomes present after the next `update()`.
`changed()` tells whether the set of emits changed during the previous frame.

```python
from hatman.emit import EmitStorage

emits = EmitStorage()
emits.emit_add("door_open", 500)
emits.update(16)
emits.emit_present("door_open")   # True
```

### Timers

A timer counts as finished until it is started. It can be advanced on its
own, or registered with a `TimerController` that advances all of its timers.
The controller holds its timers weakly.

```python
from hatman.timer import Timer, TimerController

timer = Timer()
timer.start(1000)
timer.update(250)
timer.elapsed_percentage()   # 0.25
timer.finished()             # False

controller = TimerController()
shared = Timer(controller)
shared.start(100)
controller.update(101)
shared.finished()            # True
```

### Input

Presses and releases last for a single frame. Held state lasts until the key
or button is released.

```python
from hatman.controls import Controls, Key, key_name
from hatman.inputs import Input

controls = Controls()
state = Input()
state.key_down(controls.jump)
state.key_pressed(Key.SPACE)   # True
state.begin_new_frame()
state.key_pressed(Key.SPACE)   # False
state.key_held(Key.SPACE)      # True
key_name(Key.LCONTROL)         # "LCtrl"
```

### Saves and config

`Saver.create_new()` starts a game in level `desolation` at `(160.0, 1296.0)`
and writes the file. `record_state()` stores the level name, the position, the
inventory and the flags. The inventory is given as `(name, quantity)` pairs or
as a mapping. `backup_and_delete_current()` moves the save into a backup
directory, which is `backups/` unless you name another.

```python
from hatman.saver import Saver, Config, config_create, config_parse

saver = Saver("save.json")
if not saver.save_present():
    saver.create_new()
saver.record_state("caves", (64.0, 128.0), {"key": 1}, {"boss_defeated"})
saver.write()
saver.player_inventory()     # [("key", 1)]

config_create(Config(music=5), "CONFIG.json")
config_parse("CONFIG.json").music   # 5
config_parse("missing.json")        # None
```

### Levels

`parse_level()` takes a decoded Tiled map and returns a `Level` with:

- the tile layers (`backlayer`, `layer`, `midlayer` and `frontlayer`) in a `LevelMap`
- the map's tilesets, as `TilesetRef`
- the background and music properties
- `EntitySpawn` entries from `[entity]` object layers
- scripts from `[script]{...}` object layers: `LevelChange`, `LevelSwitch`, `Portal`, `Hint` and `Checkpoint`

Entities and checkpoints that carry a `requires_flag` property are left out
when that flag check fails. `load_level()` reads a map file and names the level
after the file.

```python
from hatman.flags import Flags
from hatman.level import load_level

level = load_level("content/levels/desolation.json", Flags())
level.size                          # (width, height) in tiles
level.map.tile_at("layer", 0, 0)    # a TilePlacement or None
```

### Game flow

`Game` turns requests into screen changes once the running fade transition
has finished. `step()` runs one frame: it limits the frame to 40 ms, carries
out requests, then updates the level, music, emits and timers. It returns an
`ExitCode` other than `NONE` when the game should stop. The interface state
is kept in `game.gui`.

```python
from hatman.game import Game

game = Game()
game.handle_requests()     # ExitCode.NONE; the main menu is now shown
game.gui.main_menu         # True
game.request_level_change("caves", (64.0, 128.0))
game.update(1001)          # let the fade-out finish
game.handle_requests()
game.level.name            # "caves"
game.is_running()          # True
```

By default a level loaded from a save is built from the `Saver` passed to
`Game`. You can pass your own `load_from_save` and `change_level` callables to
build other level objects.

## What this package does not do

- It opens no window and draws nothing. Fades and screens are recorded in `GuiState` and `Fade` values only.
- It plays no sound. `Audio` keeps the current track and the computed music volume. Sound effects are loaded as raw bytes, or through a loader you supply.
- It has no entity or tile behaviour: no physics, combat, items or player. Entity spawns and tiles are records of what a map places where. Tileset contents, such as which entity a tile spawns, are not read.
- There is no command to start the game.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.