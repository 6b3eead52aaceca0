"""Plain-text views of a conditional network."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TextIO

from epinet.network import ConditionalNet, ModificationState

_DISTRIBUTION_LABELS = {
    ModificationState.UNMETHYLATED: "Unmethylated",
    ModificationState.METHYLATED: "Methylated",
    ModificationState.HYDROXYMETHYLATED: "Hydroxymethylated",
    ModificationState.FORMYLATED: "Formylated",
    ModificationState.CARBOXYLATED: "Carboxylated",
}


def state_to_string(state: ModificationState) -> str:
    """One-letter code of a modification state."""
    return state.value


def display_network(net: ConditionalNet, file: TextIO | None = None) -> None:
    """Print every site with its state code."""
    out = file if file is not None else sys.stdout
    print("Epigenetic Network State:", file=out)
    for position, site in net.sites.items():
        print(f"Site {position}: {state_to_string(site.state)}", file=out)


def display_state_distribution(net: ConditionalNet, file: TextIO | None = None) -> None:
    """Print how many sites are in each modification state."""
    out = file if file is not None else sys.stdout
    distribution = Counter(site.state for site in net.sites.values())
    print("State Distribution:", file=out)
    for state, label in _DISTRIBUTION_LABELS.items():
        print(f"{label}: {distribution[state]}", file=out)