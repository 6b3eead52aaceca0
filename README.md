# epinet

Small, dependency-free simulations of epigenetic modification.

The package has three parts:

- **Conditional network** (`epinet.network`, `epinet.visualization`): named
  sites. Each site is an `EpigeneticSite` that carries a `ModificationState`.
  The states are `UNMETHYLATED`, `METHYLATED`, `HYDROXYMETHYLATED`,
  `FORMYLATED` and `CARBOXYLATED`.
  - A `ConditionalNet` holds the sites and the transition probabilities
    between them.
  - Each call to `simulate_step(rng)` makes one uniform draw for every site
    that has outgoing transitions. It compares the draw with the running sum
    of that site's probabilities. When the draw falls within the sum, an
    unmethylated site becomes methylated.
  - `display_network` prints each site with its one-letter state code.
    `display_state_distribution` prints how many sites are in each state.
- **CpG state views** (`epinet.cpg`): the views work on per-step state strings.
  - `print_cpg_matrix` prints a coloured terminal matrix.
  - `calculate_distribution` counts the states.
  - `print_distribution_bars` draws a bar chart with one block per five
    percent.
  - `export_data_for_plotting` writes a CSV file.
  - `random_states` produces random example data.
- **Chromatin signalling** (`epinet.chromatin`): a `Nucleosome` is changed by
  writers.
  - `AcetylationWriter` adds `H3K27ac` and makes it active.
  - `MethylationWriter` adds `H3K9me3` and makes it inactive.
  - `PhosphorylationWriter` adds `H3S10ph` and makes it active.
  - `propagate_signal` activates the nucleosome after each active one and
    tags it with `SignalPropagated`.
  - `simulate_transcription` reports each position as transcribed or silent.
  - `AcetylationReader` lists the acetylation marks of a nucleosome.

## Installation

```
pip install .
```

## Command line

```
epinet            # conditional-network simulation
epinet-cpg        # random CpG states as a matrix and bars, plus a CSV export
epinet-chromatin  # chromatin signalling simulation
```

### `epinet`

This command builds ten sites, `CpG_1` to `CpG_10`, with the transitions
`CpG_1 -> CpG_2` (0.3), `CpG_1 -> CpG_3` (0.2) and `CpG_2 -> CpG_4` (0.4). At
each step it prints the network and the state distribution, then simulates
one step.

Options:

- `--steps` (default 10)
- `--delay`: seconds to pause between steps (default 1.0)
- `--seed`

### `epinet-cpg`

This command prints a matrix view of random states and a distribution chart
for each step. It then writes the CSV file.

Options:

- `--steps` (default 5)
- `--sites` (default 10)
- `--output` (default `cpg_states.csv`)
- `--seed`

The CSV file has two tables, separated by blank lines:

- `Step,Site,State`, with one row per site and step
- `Step,U,M,H,F,C`, with one row of counts per step

If the output file cannot be opened, the command prints an error and exits
with status 1.

### `epinet-chromatin`

This command runs steps over a row of nucleosomes. At each step it applies
one randomly chosen writer to every nucleosome, then spreads the signal and
prints the transcription state.

Options:

- `--steps` (default 5)
- `--size` (default 10)
- `--seed`

## Library use

```python
import random

from epinet.network import ConditionalNet, ModificationState
from epinet.visualization import display_network, display_state_distribution

net = ConditionalNet()
for i in range(1, 11):
    net.add_site(f"CpG_{i}", ModificationState.UNMETHYLATED)
net.add_transition("CpG_1", "CpG_2", 0.3)
net.add_transition("CpG_1", "CpG_3", 0.2)

net.simulate_step(random.Random(42))
display_network(net)
display_state_distribution(net)
```

The CpG helpers take a sequence of per-step state strings. The strings are
made of the letters `U`, `M`, `H`, `F` and `C`:

```python
from epinet.cpg import calculate_distribution, export_data_for_plotting

states = ["UMHFC", "MMMUU"]
calculate_distribution(states[0])   # [1, 1, 1, 1, 1], in U, M, H, F, C order
export_data_for_plotting(states, "cpg_states.csv")
```

The printing functions write to standard output by default. They take a
`file` argument to write elsewhere.

## What it does not do

The package draws no graphical plots and writes no image files. For charts,
load the CSV export into a plotting tool of your choice.

## Tests

```
pip install .[test]
pytest
```