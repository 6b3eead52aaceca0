"""Terminal and CSV views of CpG site states over simulation steps.

States are given as one string per step, one character per site, using the
codes U, M, H, F and C.
"""

from __future__ import annotations

import argparse
import random
import sys
from collections import Counter
from collections.abc import Sequence
from typing import TextIO

STATE_CODES = "UMHFC"

COLOR_RESET = "\033[0m"
COLORS = {
    "U": "\033[38;5;253m\033[48;5;253m",
    "M": "\033[38;5;240m\033[48;5;240m",
    "H": "\033[38;5;33m\033[48;5;33m",
    "F": "\033[38;5;76m\033[48;5;76m",
    "C": "\033[38;5;208m\033[48;5;208m",
}
LABELS = ("Unmethylated (U)", "Methylated (M)", "H", "F", "C")


def calculate_distribution(states: str) -> list[int]:
    """Count the sites of one step in each state, in U, M, H, F, C order."""
    counts = Counter(states)
    return [counts[code] for code in STATE_CODES]


def _cell(code: str) -> str:
    color = COLORS.get(code)
    return f"{color}   {COLOR_RESET}" if color else "   "


def print_cpg_matrix(states: Sequence[str], file: TextIO | None = None) -> None:
    """Print one coloured row of cells per step."""
    out = file if file is not None else sys.stdout
    num_sites = len(states[0]) if states else 0
    print("CpG Site Matrix View:", file=out)
    print("     " + "".join(f" {j:2d} " for j in range(1, num_sites + 1)), file=out)
    for step, row in enumerate(states):
        print(f"Step {step:2d} " + "".join(_cell(code) for code in row), file=out)
    print(file=out)


def print_distribution_bars(
    step: int, counts: Sequence[int], num_sites: int, file: TextIO | None = None
) -> None:
    """Print a bar per state, one block for every five percent of the sites."""
    out = file if file is not None else sys.stdout
    print(f"State Distribution at Step {step}:", file=out)
    for label, code, count in zip(LABELS, STATE_CODES, counts):
        percentage = count / num_sites * 100
        bar = "█" * int(percentage / 5)
        print(f"{label:<16s} [{percentage:3.1f}%] {COLORS[code]}{bar}{COLOR_RESET}", file=out)
    print(file=out)


def export_data_for_plotting(states: Sequence[str], filename: str) -> None:
    """Write per-site states and per-step counts as CSV.

    Raises OSError when the file cannot be opened.
    """
    with open(filename, "w", encoding="utf-8") as fp:
        fp.write("Step,Site,State\n")
        for step, row in enumerate(states):
            for site, code in enumerate(row, start=1):
                fp.write(f"{step},{site},{code}\n")
        fp.write("\n\nStep,U,M,H,F,C\n")
        for step, row in enumerate(states):
            counts = ",".join(str(c) for c in calculate_distribution(row))
            fp.write(f"{step},{counts}\n")


def random_states(
    num_steps: int, num_sites: int, rng: random.Random | None = None
) -> list[str]:
    """Random example data: ``num_steps`` rows of ``num_sites`` state codes."""
    rng = rng if rng is not None else random.Random()
    return [
        "".join(rng.choice(STATE_CODES) for _ in range(num_sites))
        for _ in range(num_steps)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Show and export random example CpG states."""
    parser = argparse.ArgumentParser(
        prog="epinet-cpg", description="Visualise CpG site states."
    )
    parser.add_argument("--steps", type=int, default=5)
    parser.add_argument("--sites", type=int, default=10)
    parser.add_argument("--output", default="cpg_states.csv")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.steps < 0 or args.sites < 1:
        parser.error("--steps must not be negative and --sites must be positive")

    states = random_states(args.steps, args.sites, random.Random(args.seed))
    print_cpg_matrix(states)
    for step, row in enumerate(states):
        print_distribution_bars(step, calculate_distribution(row), args.sites)
    try:
        export_data_for_plotting(states, args.output)
    except OSError:
        print("Error opening file for writing", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())