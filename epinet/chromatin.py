"""Nucleosome modifications, signal spreading and transcription state."""

from __future__ import annotations

import argparse
import random
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Nucleosome:
    """A nucleosome at a position with its histone modifications."""

    position: int
    modifications: list[str] = field(default_factory=list)
    is_active: bool = False


class ChromatinModifier(ABC):
    """Writes a modification onto a nucleosome."""

    @abstractmethod
    def modify(self, nucleosome: Nucleosome) -> None:
        """Apply the modification."""


class AcetylationWriter(ChromatinModifier):
    def modify(self, nucleosome: Nucleosome) -> None:
        nucleosome.modifications.append("H3K27ac")
        nucleosome.is_active = True


class MethylationWriter(ChromatinModifier):
    def modify(self, nucleosome: Nucleosome) -> None:
        nucleosome.modifications.append("H3K9me3")
        nucleosome.is_active = False


class PhosphorylationWriter(ChromatinModifier):
    def modify(self, nucleosome: Nucleosome) -> None:
        nucleosome.modifications.append("H3S10ph")
        nucleosome.is_active = True


class Reader(ABC):
    """Interprets the modifications of a nucleosome."""

    @abstractmethod
    def read(self, nucleosome: Nucleosome, file: TextIO | None = None) -> None:
        """Report on the nucleosome."""


class AcetylationReader(Reader):
    def read(self, nucleosome: Nucleosome, file: TextIO | None = None) -> None:
        out = file if file is not None else sys.stdout
        print(f"Acetylation Reader - Position: {nucleosome.position}", file=out)
        for mod in nucleosome.modifications:
            if "ac" in mod:
                print(f"Detected acetylation: {mod}", file=out)


def propagate_signal(chromatin: Sequence[Nucleosome]) -> None:
    """Activate each nucleosome that follows an active one, left to right."""
    for current, following in zip(chromatin, chromatin[1:]):
        if current.is_active:
            following.is_active = True
            following.modifications.append("SignalPropagated")


def simulate_transcription(
    chromatin: Sequence[Nucleosome], file: TextIO | None = None
) -> None:
    """Print whether the gene at each nucleosome is transcribed."""
    out = file if file is not None else sys.stdout
    for nucleosome in chromatin:
        status = "transcribed" if nucleosome.is_active else "silent"
        print(f"Gene at position {nucleosome.position} is {status}.", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run random modification steps over a stretch of chromatin."""
    parser = argparse.ArgumentParser(
        prog="epinet-chromatin", description="Simulate chromatin modification."
    )
    parser.add_argument("--steps", type=int, default=5)
    parser.add_argument("--size", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.steps < 0 or args.size < 0:
        parser.error("--steps and --size must not be negative")

    rng = random.Random(args.seed)
    chromatin = [Nucleosome(i) for i in range(args.size)]
    writers: list[ChromatinModifier] = [
        AcetylationWriter(),
        MethylationWriter(),
        PhosphorylationWriter(),
    ]
    for step in range(1, args.steps + 1):
        print(f"=== Simulation Step {step} ===")
        for nucleosome in chromatin:
            rng.choice(writers).modify(nucleosome)
        propagate_signal(chromatin)
        simulate_transcription(chromatin)
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())