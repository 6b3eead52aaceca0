"""Command line run of the example conditional network."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Sequence

from epinet.network import ConditionalNet
from epinet.visualization import display_network, display_state_distribution


def _build_model() -> ConditionalNet:
    model = ConditionalNet()
    for i in range(1, 11):
        model.add_site(f"CpG_{i}")
    model.add_transition("CpG_1", "CpG_2", 0.3)
    model.add_transition("CpG_1", "CpG_3", 0.2)
    model.add_transition("CpG_2", "CpG_4", 0.4)
    return model


def main(argv: Sequence[str] | None = None) -> int:
    """Simulate the example network, printing its state at every step."""
    parser = argparse.ArgumentParser(
        prog="epinet", description="Simulate epigenetic modifications."
    )
    parser.add_argument("--steps", type=int, default=10, help="number of steps")
    parser.add_argument(
        "--delay", type=float, default=1.0, help="seconds to pause between steps"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.steps < 0:
        parser.error("--steps must not be negative")
    if args.delay < 0:
        parser.error("--delay must not be negative")

    rng = random.Random(args.seed)
    model = _build_model()
    print("Starting simulation of epigenetic modifications...\n")
    for step in range(args.steps):
        print(f"Step {step}")
        display_network(model)
        display_state_distribution(model)
        print()
        model.simulate_step(rng)
        time.sleep(args.delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())