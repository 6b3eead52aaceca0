"""Conditional network of epigenetic sites and their modification states."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


class ModificationState(Enum):
    """Modification state of a cytosine at a CpG site."""

    UNMETHYLATED = "U"
    METHYLATED = "M"
    HYDROXYMETHYLATED = "H"
    FORMYLATED = "F"
    CARBOXYLATED = "C"


@dataclass
class EpigeneticSite:
    """A named genomic position carrying a modification state."""

    position: str
    state: ModificationState = ModificationState.UNMETHYLATED


class ConditionalNet:
    """Sites linked by transition probabilities, simulated step by step."""

    def __init__(self) -> None:
        self._sites: dict[str, EpigeneticSite] = {}
        self._transitions: dict[str, dict[str, float]] = {}

    def add_site(
        self,
        position: str,
        initial_state: ModificationState = ModificationState.UNMETHYLATED,
    ) -> None:
        """Add a site; a site already present at ``position`` is kept as is."""
        self._sites.setdefault(position, EpigeneticSite(position, initial_state))

    def add_transition(self, source: str, target: str, probability: float) -> None:
        """Set the probability of a transition from ``source`` to ``target``."""
        self._transitions.setdefault(source, {})[target] = probability

    def simulate_step(self, rng: random.Random | None = None) -> None:
        """Advance every site that has outgoing transitions by one step.

        For each such site (in position order) one uniform number is drawn and
        compared with the running sum of its transition probabilities (in
        target order). When it falls within the sum, an unmethylated site
        becomes methylated.
        """
        rng = rng if rng is not None else random.Random()
        for position in sorted(self._sites):
            transitions = self._transitions.get(position)
            if transitions is None:
                continue
            site = self._sites[position]
            draw = rng.random()
            cumulative = 0.0
            for target in sorted(transitions):
                cumulative += transitions[target]
                if draw <= cumulative:
                    if site.state is ModificationState.UNMETHYLATED:
                        site.state = ModificationState.METHYLATED
                    break

    @property
    def sites(self) -> dict[str, EpigeneticSite]:
        """The sites keyed by position, in position order."""
        return {position: self._sites[position] for position in sorted(self._sites)}