import io

import pytest

from battlefield.commands import CreateMap, March, SpawnHunter, SpawnSwordsman
from battlefield.controller import Controller
from battlefield.events import (
    MapCreated,
    MarchEnded,
    MarchStarted,
    UnitMoved,
    UnitSpawned,
)
from battlefield.model import Model
from battlefield.view import View


class _RecordingLog:
    def __init__(self):
        self.entries = []

    def log(self, tick, event):
        self.entries.append((tick, event))

    @property
    def events(self):
        return [event for _, event in self.entries]


@pytest.fixture
def setup():
    model = Model(10, 10)
    out = io.StringIO()
    view = View(model, out)
    log = _RecordingLog()
    return Controller(model, view, log), model, out, log


def test_create_map_resizes_and_logs(setup):
    controller, model, _, log = setup
    CreateMap(width=15, height=20).execute(controller)
    assert (model.width, model.height) == (15, 20)
    assert log.entries == [(1, MapCreated(15, 20))]


def test_create_map_rejects_zero(setup):
    controller = setup[0]
    with pytest.raises(ValueError):
        CreateMap(width=0, height=5).execute(controller)


def test_commands_require_controller():
    with pytest.raises(RuntimeError, match="Controller is null"):
        CreateMap(width=3, height=3).execute(None)


def test_spawn_swordsman_adds_unit(setup):
    controller, model, _, log = setup
    SpawnSwordsman(unit_id=1, x=2, y=3, hp=50, strength=5).execute(controller)
    unit = model.get_unit("1")
    assert unit.unit_type == "Swordsman"
    assert (unit.x, unit.y, unit.health, unit.strength) == (2, 3, 50, 5)
    assert log.events == [UnitSpawned(1, "Swordsman", 2, 3)]


def test_spawn_hunter_adds_unit(setup):
    controller, model, _, log = setup
    SpawnHunter(unit_id=7, x=1, y=1, hp=30, agility=4, strength=6, range=3).execute(
        controller
    )
    unit = model.get_unit("7")
    assert unit.unit_type == "Hunter"
    assert (unit.agility, unit.strength, unit.range) == (4, 6, 3)
    assert log.events == [UnitSpawned(7, "Hunter", 1, 1)]


def test_spawn_out_of_bounds_reports_message(setup):
    controller, model, out, log = setup
    SpawnHunter(unit_id=2, x=15, y=15, hp=10, agility=1, strength=1, range=1).execute(
        controller
    )
    assert model.get_unit("2") is None
    assert log.entries == []
    assert out.getvalue() == (
        "Failed to spawn Hunter: Unit position is out of map bounds\n"
    )


def test_spawn_invalid_stats_reports_message(setup):
    controller, model, out, _ = setup
    SpawnSwordsman(unit_id=3, x=0, y=0, hp=10, strength=0).execute(controller)
    assert model.get_unit("3") is None
    assert "Failed to spawn Swordsman: Swordsman strength must be positive" in out.getvalue()


def test_spawn_on_occupied_cell_reports_message(setup):
    controller, model, out, _ = setup
    SpawnSwordsman(unit_id=1, x=4, y=4, hp=10, strength=2).execute(controller)
    SpawnSwordsman(unit_id=2, x=4, y=4, hp=10, strength=2).execute(controller)
    assert model.get_unit("2") is None
    assert "Position is already occupied" in out.getvalue()


def test_march_unknown_unit_raises(setup):
    controller = setup[0]
    with pytest.raises(RuntimeError, match="Unit not found: 9"):
        March(unit_id=9, target_x=1, target_y=1).execute(controller)


def test_march_moves_unit_step_by_step(setup):
    controller, model, _, log = setup
    SpawnSwordsman(unit_id=1, x=0, y=0, hp=10, strength=2).execute(controller)
    log.entries.clear()

    March(unit_id=1, target_x=5, target_y=2).execute(controller)

    unit = model.get_unit("1")
    assert (unit.x, unit.y) == (5, 2)
    events = log.events
    assert events[0] == MarchStarted(1, 0, 0, 5, 2)
    assert events[-1] == MarchEnded(1, 5, 2)
    moves = events[1:-1]
    assert all(isinstance(event, UnitMoved) for event in moves)
    assert len(moves) == max(5, 2)
    positions = [(0, 0)] + [(event.x, event.y) for event in moves]
    for (ax, ay), (bx, by) in zip(positions, positions[1:]):
        assert abs(bx - ax) <= 1 and abs(by - ay) <= 1
        assert (ax, ay) != (bx, by)
    assert all(tick == 1 for tick, _ in log.entries)


def test_march_to_current_position_has_no_moves(setup):
    controller, _, _, log = setup
    SpawnSwordsman(unit_id=1, x=3, y=3, hp=10, strength=2).execute(controller)
    log.entries.clear()
    March(unit_id=1, target_x=3, target_y=3).execute(controller)
    assert log.events == [MarchStarted(1, 3, 3, 3, 3), MarchEnded(1, 3, 3)]


def test_march_moves_backwards(setup):
    controller, model, _, log = setup
    SpawnSwordsman(unit_id=4, x=6, y=6, hp=10, strength=2).execute(controller)
    March(unit_id=4, target_x=2, target_y=6).execute(controller)
    unit = model.get_unit("4")
    assert (unit.x, unit.y) == (2, 6)
    moves = [event for event in log.events if isinstance(event, UnitMoved)]
    assert [event.x for event in moves] == sorted((event.x for event in moves), reverse=True)
    assert all(event.y == 6 for event in moves)