# battlefield

A small battle map simulation. Units are placed on a rectangular map and
moved across it by commands read from a text file. Each action is reported
as a line in an event log on standard output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a scenario

```
battlefield commands.txt
```

The same entry point can be started with `python -m battlefield.game
commands.txt`.

The command takes exactly one argument, the path of a command file. If the
argument is missing, the file cannot be opened, or processing stops with an
error, the message is printed to standard error as
`Failed to run application: ...` and the command exits with status 1. On
success it exits with status 0.

## Command file format

Each line holds one command: its name, then its fields as
whitespace-separated unsigned integers. Empty lines, whitespace-only lines
and lines that start with `//` are skipped. Command names are
case-sensitive. An unknown command name stops processing with an error.

| Command           | Fields                                            |
|-------------------|---------------------------------------------------|
| `CREATE_MAP`      | `width height`                                    |
| `SPAWN_SWORDSMAN` | `unitId x y hp strength`                          |
| `SPAWN_HUNTER`    | `unitId x y hp agility strength range`            |
| `MARCH`           | `unitId targetX targetY`                          |

Fields are read in the order shown. Reading stops at the first token that is
not an unsigned integer no larger than 4294967295; that field and every field
after it take the value 0. Missing fields are 0 as well, and extra tokens are
ignored.

Example:

```
// a 10 by 10 field with two units
CREATE_MAP 10 10
SPAWN_SWORDSMAN 1 0 0 5 2
SPAWN_HUNTER 2 9 0 10 5 1 4
MARCH 1 9 9
```

Behaviour of each command:

- The map is 10 by 10 until a `CREATE_MAP` changes its size. A width or
  height of 0 stops processing with an error. Units already on the map stay
  where they are.
- A unit that cannot be spawned (a position off the map or already taken, or
  a hit-point, strength, agility or range value of 0) is reported with a
  `Failed to spawn Hunter: ...` or `Failed to spawn Swordsman: ...` message
  and processing continues.
- `MARCH` of a unit that does not exist stops processing with an error. A
  march moves the unit one step per event, diagonally while both coordinates
  differ and then straight, until it reaches the target. It does not check
  the map bounds or whether the cells on the way are taken.

## Event log

Every event is written as one line: the tick in brackets, the event name,
then its fields as `name=value` pairs, each followed by a space. The tick is
always 1.

```
[1] MAP_CREATED width=10 height=10 
[1] UNIT_SPAWNED unitId=1 unitType=Swordsman x=0 y=0 
[1] MARCH_STARTED unitId=1 x=0 y=0 targetX=9 targetY=9 
[1] UNIT_MOVED unitId=1 x=1 y=1 
...
[1] MARCH_ENDED unitId=1 x=9 y=9 
```

## Using the library

- `battlefield.units`: `Unit`, with `unit_id`, `unit_type`, `x`, `y`,
  `health`, `set_position` and `is_alive`; `Hunter` and `Swordsman`, built
  from `MovableMixin` (`move_to`), `CombatantMixin` (`take_damage`, which
  never takes health below 0) and, for hunters, `RangedMixin`
  (`can_shoot_at`, a Manhattan-distance check against `range`).
- `battlefield.model`: `Model`, which holds the map `width` and `height`
  and the units on it, with `add_unit`, `remove_unit`, `get_unit`,
  `all_units`, `set_map_size`, `is_position_valid` and
  `is_position_occupied`.
- `battlefield.view`: `View`, which writes `display_map`, `display_unit`,
  `display_all_units` and `display_message` output to a stream (standard
  output by default). The map shows each unit as the first letter of its type
  and empty cells as `.`.
- `battlefield.events`: the event records `MapCreated`, `MarchStarted`,
  `MarchEnded`, `UnitMoved`, `UnitSpawned`, `UnitAttacked` and `UnitDied`;
  `EventLog`, which writes them to a stream; `format_fields` and
  `print_debug`, which render any such record as text.
- `battlefield.commands`: `Command` and the commands `CreateMap`, `March`,
  `SpawnHunter` and `SpawnSwordsman`, each with `execute(controller)`.
- `battlefield.parser`: `CommandParser`, whose `add` registers a handler for
  a command type (once per name) and whose `parse` reads lines of text.
- `battlefield.controller`: `Controller`, which exposes `model`, `view` and
  `event_log` and runs commands with `handle_command`.
- `battlefield.game`: `Game`, which wires the above together and runs a
  command file with `run([path])`, writing to an optional stream; and `main`,
  the entry point of the `battlefield` command.

```python
import io
from battlefield.game import Game

out = io.StringIO()
Game(out).run(["commands.txt"])
print(out.getvalue())
```

## What it does not do

There is no combat. Units have strength, hunters have agility and range, and
`take_damage` and `can_shoot_at` are available, but no command makes units
attack, and the simulation has no turns beyond running the commands in
order. The `UnitAttacked` and `UnitDied` events exist but nothing logs them.
The map is not drawn during a run; `View.display_map` is only available from
the library.