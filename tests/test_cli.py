"""Tests for the command-line interface."""

import json
import pytest
from signgrav.cli.main import main


def test_run(capsys):
    """run prints every step and the final summary."""
    main(["run", "--positions", "-1", "1", "--steps", "3"])
    
    out = capsys.readouterr().out
    assert "Backend: numpy" in out
    assert "[-1 1]  [0 0]" in out
    assert "[1 -1]  [0 0]" in out
    assert "Final: PE=2, KE=0, TE=0" in out
    assert "Simulation complete!" in out


def test_run_report_every(capsys):
    """Only every K-th step and the last step are printed."""
    main(["run", "--positions", "-1", "1", "--steps", "3", "--report-every", "2"])
    
    rows = [line for line in capsys.readouterr().out.splitlines() if line[:1].isdigit()]
    assert [row.split()[0] for row in rows] == ["0", "2", "3"]


def test_run_with_plot(tmp_path, capsys):
    """--plot writes an image."""
    output = tmp_path / "plot.png"
    
    main(["run", "--positions", "0", "3", "--steps", "4", "--plot", str(output)])
    
    assert output.exists()
    assert f"Plot saved to {output}" in capsys.readouterr().out


def test_run_from_config(tmp_path, capsys):
    """Config file values are used and command-line values override them."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"initial_positions": [-1, 1], "steps": 100}))
    
    main(["run", "--config", str(path), "--steps", "1"])
    
    out = capsys.readouterr().out
    assert "2 bodies, 1 steps" in out


def test_cycle(capsys):
    """cycle prints the repeat length."""
    main(["cycle", "--positions", "-1", "1"])
    
    assert "After 6 step(s), initial state of bodies repeats." in capsys.readouterr().out


def test_cycle_not_found(capsys):
    """Exhausted search exits with status 1."""
    with pytest.raises(SystemExit) as excinfo:
        main(["cycle", "--positions", "-1", "1", "--max-steps", "3"])
    
    assert excinfo.value.code == 1
    assert "did not repeat within 3 steps" in capsys.readouterr().out


def test_invalid_steps():
    """Negative step counts are usage errors."""
    with pytest.raises(SystemExit) as excinfo:
        main(["run", "--positions", "1", "2", "--steps", "-1"])
    
    assert excinfo.value.code == 2


def test_missing_positions():
    """Running without positions is a usage error."""
    with pytest.raises(SystemExit) as excinfo:
        main(["run", "--steps", "3"])
    
    assert excinfo.value.code == 2


def test_missing_command():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    
    assert excinfo.value.code == 2


def test_list_backends(capsys):
    main(["--list-backends"])
    
    out = capsys.readouterr().out
    assert "Available backends:" in out
    assert "  - numpy" in out


@pytest.mark.parametrize("filename,content", [
    ("run.json", json.dumps({"initial_positions": [-1, 1], "step": 3})),
    ("run.json", json.dumps([-1, 1])),
    ("run.json", "{not json"),
    ("run.yaml", "initial_positions: [-1, 1\nsteps: 3\n"),
    ("run.yaml", "- -1\n- 1\n"),
])
def test_bad_config_file(tmp_path, capsys, filename, content):
    """Unreadable or malformed config files are usage errors."""
    path = tmp_path / filename
    path.write_text(content)
    
    with pytest.raises(SystemExit) as excinfo:
        main(["run", "--config", str(path)])
    
    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_missing_config_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["run", "--config", str(tmp_path / "absent.json")])
    
    assert excinfo.value.code == 2


def test_negative_report_every(capsys):
    """Bad reporting interval names the option."""
    with pytest.raises(SystemExit) as excinfo:
        main(["run", "--positions", "1", "2", "--steps", "3", "--report-every", "-1"])
    
    assert excinfo.value.code == 2
    assert "report_every" in capsys.readouterr().err
