# skyradar

The logic of a 2D air traffic panel: planes fly in straight lines from a
departure point towards a target, control towers shelter planes inside their
area, and planes that meet outside every shelter crash. Flying, landing and
crashing earn medals, and the distance flown unlocks plane skins on a pilot
pass. Statistics and earned medals can be saved and restored.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Traffic scripts

Each line of a script describes one entity; fields are runs of letters,
digits and dots, separated by anything else:

```
A <departure x> <departure y> <arrival x> <arrival y> <speed> <delay>
T <x> <y> <radius>
```

- `A` lines make a `Plane` that waits `delay` seconds, then moves at `speed`
  pixels per second.
- `T` lines make a `Tower` whose circular area has the given radius.

A line holding only a newline is skipped. Any other malformed line (unknown
type, wrong number of fields, non-numeric field) raises
`skyradar.script.ScriptError`, which carries the `line_number`.

```python
from skyradar.script import load_script, read_script

actors = read_script(["A 100 100 500 500 50 0\n", "T 300 300 40\n"])
actors = load_script("scripts/example")   # ScriptError if unreadable
```

## Modules

- `skyradar.actors` – `Plane` (`advance(dt)`, `active()`, `hitbox()`),
  `Tower` (`covers(point, margin)`), `Backdrop`, and `find_actor(actors, name)`.
  Plane positions wrap around a 1920×1080 area; `advance` returns True on the
  step the plane takes off.
- `skyradar.collision` – `quadrant(position)`, `planes_collide(first, second,
  towers)`, `find_crashes(actors)` returning the crashed planes in list order,
  and `near_landmark(position)`.
- `skyradar.progress` – `Stats`, `Medal`, `Skin`; `default_medals()`,
  `award_medals(stats, medals)` returning the medals newly earned,
  `default_skins()`, `unlock_skins(skins, stats)`,
  `cycle_skin(skins, stats, index, step)` returning the new index and the skin
  to apply (None while it is locked), and `pilot_level(stats)`.
- `skyradar.saves` – `write_save(path, stats, medals)` writes kilometres,
  launches, crashes and landings, one per line, then the names of checked
  medals; `load_save(path, stats, medals)` restores kilometres, launches and
  crashes from the first three lines and checks every medal whose name starts
  a later line. It returns False, changing nothing, when the file cannot be
  opened.
- `skyradar.scenes` – `SceneId`, `menu_target(x, y)` (a scene, `QUIT`, or
  None), `menu_highlight(x, y)`, `medal_list_height(count)`,
  `scroll_medals(offset, delta, medal_count)` and
  `scroll_pilot(offset, delta, skin_count)`.
- `skyradar.textures` – `texture_path(name)` and `load_textures(loader)`, which
  calls any loader you give it with each picture's path under
  `assets/pictures/`.
- `skyradar.geometry` and `skyradar.numparse` – vector helpers and the lenient
  number parsing used by scripts and saves.

```python
from skyradar.collision import find_crashes
from skyradar.progress import Stats, award_medals, default_medals

stats = Stats()
medals = default_medals()
for _ in range(100):
    for actor in actors:
        if hasattr(actor, "advance") and actor.advance(0.1):
            stats.planes_launched += 1
    stats.planes_crashed += len(find_crashes(actors))
for medal in award_medals(stats, medals):
    print(medal.name, "-", medal.description)
```

## What the package does not do

It opens no window, draws nothing, plays no music and installs no command.
There is no main loop tying the pieces together: advancing planes, removing
landed or crashed ones, counting kilometres and checking medals each frame is
left to the caller.