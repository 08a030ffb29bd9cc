# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from odestep.cli import main
from odestep.io import load_run, load_trajectory


def test_lorenz96_run_reports_parameters(capsys):
    code = main(["-N", "8", "-n", "50", "--dt", "0.01", "--solver", "rk4"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Lorenz 96 dimension         =  8" in out
    assert "ODE solver                  =  RK4" in out
    assert "final state" in out


def test_numeric_solver_selector(capsys):
    """Integer selectors 0/1/2 pick Euler/Heun/RK4."""
    assert main(["-N", "5", "-n", "5", "--solver", "0"]) == 0
    assert "ODE solver                  =  Euler" in capsys.readouterr().out


def test_unknown_solver_fails(capsys):
    assert main(["--solver", "bogus", "-n", "5"]) == 1
    assert "Unknown ODE solver" in capsys.readouterr().err
    assert main(["--solver", "3", "-n", "5"]) == 1


def test_small_dimension_fails(capsys):
    assert main(["-N", "3", "-n", "5"]) == 1
    assert "N >= 4" in capsys.readouterr().err


def test_outfile_and_meta(tmp_path):
    traj = tmp_path / "l96.dat"
    meta = tmp_path / "l96.json"
    code = main(["-N", "6", "-n", "21", "--dt", "0.01", "--solver", "Heun",
                 "--outfile", str(traj), "--meta", str(meta)])
    assert code == 0

    t, states = load_trajectory(str(traj))
    assert states.shape == (21, 6)
    assert np.isclose(t[-1], 0.2)
    assert np.isclose(states[0, 0], 8.01)

    record = load_run(str(meta))
    assert record["solver"] == "Heun"
    assert record["N"] == 6
    assert np.allclose(record["final_state"], states[-1])


def test_ou_model_with_noise(tmp_path):
    """Scalar model with noise writes an (n, 1) trajectory and is seed-reproducible."""
    paths = [tmp_path / "a.dat", tmp_path / "b.dat"]
    for path in paths:
        code = main(["--model", "ou", "--theta", "2.0", "--mu", "1.0", "--x0", "0.0",
                     "--sigma", "0.3", "--seed", "11", "-n", "100", "--dt", "0.01",
                     "--solver", "Euler", "--outfile", str(path)])
        assert code == 0
    _, a = load_trajectory(str(paths[0]))
    _, b = load_trajectory(str(paths[1]))
    assert a.shape == (100, 1)
    assert a[0, 0] == 0.0
    assert np.array_equal(a, b)


def test_non_finite_step_fails(capsys):
    assert main(["-N", "5", "-n", "5", "--dt", "inf"]) == 1
    assert "finite" in capsys.readouterr().err
