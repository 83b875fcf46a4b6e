# demos/run_slider_sweep.py
"""
Simulate a user dragging the dashpot viscosity slider of a Maxwell model.

Every tick submits a full recompute without waiting for the previous one,
the way a UI event handler would. LatestOnlyRunner adopts only the newest
result; anything that finishes after being superseded is dropped.

Run:
    python demos/run_slider_sweep.py [--ticks 25] [--workers 2]
"""

import argparse
import logging

import numpy as np

from rheonet.catalog import load_preset
from rheonet.ids import IdGenerator
from rheonet.kernel.response import compute_responses
from rheonet.logging_config import setup_logging
from rheonet.model import Dashpot, ResponseParams
from rheonet.post import response_summary
from rheonet.scheduling import LatestOnlyRunner
from rheonet.tree import iter_nodes, set_parameter


def main():
    parser = argparse.ArgumentParser(description="Last-writer-wins recompute during a slider drag.")
    parser.add_argument("--ticks", type=int, default=25)
    parser.add_argument("--workers", type=int, default=2)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    tree = load_preset("maxwell", IdGenerator())
    dashpot_id = next(n.id for n in iter_nodes(tree) if isinstance(n, Dashpot))
    params = ResponseParams(t_max=10.0, n_points=400, t_removal=5.0).validate()

    delivered = []

    def on_result(payload):
        eta, responses = payload
        delivered.append(eta)
        print(f"  adopted eta={eta:7.2f}  final strain={responses.creep[-1].value:.6f}")

    def solve(eta):
        edited = set_parameter(tree, dashpot_id, "eta", eta)
        return eta, compute_responses(edited, params)

    etas = np.linspace(10.0, 200.0, args.ticks)
    print(f"Dragging eta from {etas[0]:g} to {etas[-1]:g} in {args.ticks} ticks...")
    with LatestOnlyRunner(on_result=on_result, max_workers=args.workers) as runner:
        for eta in etas:
            runner.submit(solve, float(eta))

    final_eta, final = runner.latest_result
    summary = response_summary(final.creep, params.t_removal)
    print()
    print(f"Submitted {args.ticks}, adopted {len(delivered)}, last adopted eta={final_eta:g}")
    print(f"Permanent set: {summary['final']:.6f}  (sigma0·t1/eta = {1.0 * 5.0 / final_eta:.6f})")


if __name__ == "__main__":
    main()
