# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Command-line driver: integrate an example system and report/save it."""

import argparse
import logging
import sys

import numpy as np

from odestep.io import save_run, save_trajectory
from odestep.methods import Scheme, display_name, parse
from odestep.models.lorenz96 import check_dimension, initial_state, lorenz96
from odestep.models.mean_reversion import mean_reversion
from odestep.noise import prefill_noise
from odestep.solvers.time_integrators import integrate, integrate_scalar


def _scheme_arg(value):
    """Accept a scheme name or its integer selector (0=Euler, 1=Heun, 2=RK4)."""
    if value.strip().lstrip("-").isdigit():
        try:
            return Scheme(int(value))
        except ValueError:
            return Scheme.UNKNOWN
    return parse(value)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="odestep-run",
        description="Integrate an example ODE system with a fixed-step explicit scheme.",
    )
    parser.add_argument(
        "--model", choices=["lorenz96", "ou"], default="lorenz96",
        help="Vector field: Lorenz 96 or scalar mean reversion (default: lorenz96)",
    )
    parser.add_argument(
        "-F", type=float, default=8.0,
        help="Lorenz 96 forcing parameter (default: 8.0)",
    )
    parser.add_argument(
        "-N", type=int, default=40,
        help="Lorenz 96 dimension (default: 40)",
    )
    parser.add_argument(
        "--theta", type=float, default=1.0,
        help="Mean-reversion rate (default: 1.0)",
    )
    parser.add_argument(
        "--mu", type=float, default=0.0,
        help="Mean-reversion level (default: 0.0)",
    )
    parser.add_argument(
        "--x0", type=float, default=1.0,
        help="Initial value for the scalar model (default: 1.0)",
    )
    parser.add_argument(
        "--dt", type=float, default=0.001,
        help="Integration step size (default: 0.001)",
    )
    parser.add_argument(
        "-n", type=int, default=10000,
        help="Number of time indices, including the initial state (default: 10000)",
    )
    parser.add_argument(
        "--solver", type=_scheme_arg, default=Scheme.HEUN,
        help="Euler, Heun or RK4, by name or 0/1/2 (default: Heun)",
    )
    parser.add_argument(
        "--sigma", type=float, default=0.0,
        help="Additive noise amplitude (default: 0.0, deterministic)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Noise generator seed (default: random)",
    )
    parser.add_argument(
        "--outfile", type=str, default=None,
        help="Write the trajectory as text columns to this path",
    )
    parser.add_argument(
        "--meta", type=str, default=None,
        help="Write run parameters and final state as JSON to this path",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Debug logging",
    )
    return parser


def _report(args, N):
    print()
    print(f"*** ODESTEP ({args.model}) ***")
    print()
    if args.model == "lorenz96":
        print(f"Lorenz 96 dimension         =  {N}")
        print(f"Lorenz 96 F parameter       =  {args.F:g}")
    else:
        print(f"mean-reversion theta        =  {args.theta:g}")
        print(f"mean-reversion mu           =  {args.mu:g}")
        print(f"initial value               =  {args.x0:g}")
    print(f"noise amplitude             =  {args.sigma:g}")
    print(f"integration step size       =  {args.dt:g}")
    print(f"number of integration steps =  {args.n}")
    print(f"ODE solver                  =  {display_name(args.solver)}")
    print()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.solver == Scheme.UNKNOWN:
        print("Unknown ODE solver", file=sys.stderr)
        return 1
    if args.n < 1:
        print(f"n must be >= 1, got {args.n}", file=sys.stderr)
        return 1

    N = args.N if args.model == "lorenz96" else 1
    try:
        if args.model == "lorenz96":
            check_dimension(N)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    _report(args, N)

    x = np.zeros(N * args.n)
    if args.sigma != 0.0:
        prefill_noise(x, N, args.n, args.dt, args.sigma, seed=args.seed)

    try:
        if args.model == "lorenz96":
            x[:N] = initial_state(N, args.F)
            integrate(args.solver, lorenz96, x, N, args.n, args.dt, args.F)
        else:
            x[0] = args.x0
            integrate_scalar(args.solver, mean_reversion, x, args.n, args.dt,
                             args.theta, args.mu)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    final = x[(args.n - 1) * N:]
    print(f"final state (first {min(N, 8)} of {N}): {np.array2string(final[:8], precision=6)}")

    if args.outfile:
        save_trajectory(args.outfile, x, N, args.n, args.dt)
        print(f"Trajectory saved to {args.outfile}")
    if args.meta:
        save_run({
            "model": args.model,
            "solver": display_name(args.solver),
            "N": N,
            "n": args.n,
            "dt": args.dt,
            "sigma": args.sigma,
            "seed": args.seed,
            "params": ({"F": args.F} if args.model == "lorenz96"
                       else {"theta": args.theta, "mu": args.mu, "x0": args.x0}),
            "final_state": final,
        }, args.meta)
        print(f"Run record saved to {args.meta}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
