import io

import pytest

from battlefield.model import Model
from battlefield.units import Hunter, Swordsman
from battlefield.view import View


@pytest.fixture
def model():
    model = Model(5, 5)
    model.add_unit(Hunter("hunter1", 0, 0, 100, 10, 15, 5))
    model.add_unit(Swordsman("sword1", 2, 2, 100, 15))
    return model


def test_display_unit(model):
    out = io.StringIO()
    View(model, out).display_unit("hunter1")
    output = out.getvalue()
    assert "hunter1" in output
    assert "Hunter" in output
    assert output == (
        "Unit hunter1:\n  Type: Hunter\n  Position: (0, 0)\n  Health: 100\n"
    )


def test_display_missing_unit(model):
    out = io.StringIO()
    View(model, out).display_unit("nonexistent")
    output = out.getvalue()
    assert "not found" in output
    assert output == "Unit nonexistent not found\n"


def test_display_all_units(model):
    out = io.StringIO()
    View(model, out).display_all_units()
    output = out.getvalue()
    assert output.startswith("Units on the map:\n")
    assert "hunter1" in output
    assert "sword1" in output
    assert "Hunter" in output
    assert "Swordsman" in output


def test_display_all_units_empty():
    out = io.StringIO()
    View(Model(3, 3), out).display_all_units()
    assert out.getvalue() == "No units on the map\n"


def test_display_map(model):
    out = io.StringIO()
    View(model, out).display_map()
    output = out.getvalue()
    assert "-----" in output
    assert "H" in output
    assert "S" in output
    assert output.splitlines() == [
        "-------------",
        "| H . . . . |",
        "| . . . . . |",
        "| . . S . . |",
        "| . . . . . |",
        "| . . . . . |",
        "-------------",
    ]


def test_display_map_dimensions_follow_model():
    out = io.StringIO()
    model = Model(4, 2)
    View(model, out).display_map()
    lines = out.getvalue().splitlines()
    assert len(lines) == model.height + 2
    assert all(len(line) == model.width * 2 + 3 for line in lines)


def test_display_message(model):
    out = io.StringIO()
    View(model, out).display_message("Test message")
    assert out.getvalue() == "Test message\n"


def test_default_stream_is_stdout(model, capsys):
    View(model).display_message("Test message")
    assert capsys.readouterr().out == "Test message\n"


def test_view_requires_model():
    with pytest.raises(ValueError):
        View(None)