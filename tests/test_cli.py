"""
Tests for the command line interface.
"""

import pytest

from gridpath.cli import main


@pytest.fixture
def grid_file(tmp_path, example_grid_text):
    """Fixture providing the canonical grid written to disk."""
    path = tmp_path / "grid.txt"
    path.write_text(example_grid_text)
    return path


def test_solve_all(grid_file, capsys):
    """Test solving both named configurations."""
    assert main(["solve", str(grid_file)]) == 0
    out = capsys.readouterr().out
    assert "standard: 102" in out
    assert "extended: 94" in out


def test_solve_single_mode(grid_file, capsys):
    """Test solving one configuration with the Dijkstra engine."""
    assert main(["solve", str(grid_file), "--mode", "extended", "--strategy", "dijkstra"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "extended: 94"


def test_show_route(grid_file, capsys):
    """Test printing the legs of the route."""
    assert main(["solve", str(grid_file), "--mode", "standard", "--show-route"]) == 0
    out = capsys.readouterr().out
    assert "route: " in out
    assert "RIGHTx" in out or "DOWNx" in out


def test_estimate(grid_file, capsys):
    """Test printing the staircase bounds."""
    assert main(["estimate", str(grid_file)]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split(":")[0] for line in lines] == ["standard", "extended"]
    assert int(lines[0].split(": ")[1]) >= 102


def test_estimate_without_staircase(tmp_path, capsys):
    """Test the estimate output when no staircase fits."""
    path = tmp_path / "tiny.txt"
    path.write_text("123\n456\n789\n")
    assert main(["estimate", str(path), "--mode", "extended"]) == 0
    assert capsys.readouterr().out.strip() == "extended: none"


def test_missing_file(tmp_path, capsys):
    """Test the error for a missing grid file."""
    assert main(["solve", str(tmp_path / "missing.txt")]) == 1
    assert "Error: File not found" in capsys.readouterr().err


def test_malformed_grid(tmp_path, capsys):
    """Test the error for a malformed grid file."""
    path = tmp_path / "bad.txt"
    path.write_text("12\n3\n")
    assert main(["solve", str(path)]) == 1
    assert "Error: Validation Error:" in capsys.readouterr().err


def test_no_path(tmp_path, capsys):
    """Test the error when no route exists."""
    path = tmp_path / "narrow.txt"
    path.write_text("111\n111\n111\n")
    assert main(["solve", str(path), "--mode", "extended"]) == 1
    assert "Error: Search Error: No path reaches" in capsys.readouterr().err


def test_budget_exhausted(grid_file, capsys):
    """Test the error when the state budget runs out."""
    assert main(["solve", str(grid_file), "--max-states", "3"]) == 1
    assert "max_states=3" in capsys.readouterr().err


def test_invalid_budget(grid_file, capsys):
    """Test the error for an invalid budget option."""
    assert main(["solve", str(grid_file), "--timeout", "-1"]) == 1
    assert "timeout must be positive" in capsys.readouterr().err


def test_unknown_mode(grid_file):
    """Test that argparse rejects unknown modes."""
    with pytest.raises(SystemExit):
        main(["solve", str(grid_file), "--mode", "ultra"])
