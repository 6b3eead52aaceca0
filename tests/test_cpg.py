import csv
import io
import random

import pytest

from epinet.cpg import (
    COLOR_RESET,
    COLORS,
    calculate_distribution,
    export_data_for_plotting,
    main,
    print_cpg_matrix,
    print_distribution_bars,
    random_states,
)


def test_distribution_counts_each_code():
    assert calculate_distribution("UMHFCU") == [2, 1, 1, 1, 1]


def test_distribution_ignores_unknown_codes():
    counts = calculate_distribution("UUX?M")
    assert sum(counts) == 3


def test_matrix_view():
    out = io.StringIO()
    print_cpg_matrix(["UM", "C?"], out)
    lines = out.getvalue().split("\n")
    assert lines[0] == "CpG Site Matrix View:"
    assert lines[1] == "       1   2 "
    assert lines[2] == f"Step  0 {COLORS['U']}   {COLOR_RESET}{COLORS['M']}   {COLOR_RESET}"
    assert lines[3] == f"Step  1 {COLORS['C']}   {COLOR_RESET}   "


def test_distribution_bars_full_bar():
    out = io.StringIO()
    print_distribution_bars(0, [10, 0, 0, 0, 0], 10, out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "State Distribution at Step 0:"
    assert lines[1] == f"Unmethylated (U) [100.0%] {COLORS['U']}{'█' * 20}{COLOR_RESET}"
    assert lines[3].startswith("H                [0.0%] ")


def test_distribution_bars_zero_sites():
    with pytest.raises(ZeroDivisionError):
        print_distribution_bars(0, [0, 0, 0, 0, 0], 0, io.StringIO())


def test_random_states_shape_and_alphabet():
    states = random_states(4, 7, random.Random(2))
    assert len(states) == 4
    assert all(len(row) == 7 and set(row) <= set("UMHFC") for row in states)
    assert states == random_states(4, 7, random.Random(2))


def test_export_round_trip(tmp_path):
    states = ["UMH", "FCU"]
    path = tmp_path / "out.csv"
    export_data_for_plotting(states, str(path))
    text = path.read_text(encoding="utf-8")
    sites_part, counts_part = text.split("\n\n\n")
    rows = list(csv.DictReader(io.StringIO(sites_part + "\n")))
    rebuilt = ["", ""]
    for row in rows:
        rebuilt[int(row["Step"])] += row["State"]
    assert rebuilt == states
    count_rows = list(csv.DictReader(io.StringIO(counts_part)))
    for row, states_row in zip(count_rows, states):
        values = [int(row[k]) for k in "UMHFC"]
        assert values == calculate_distribution(states_row)


def test_export_bad_path(tmp_path):
    with pytest.raises(OSError):
        export_data_for_plotting(["U"], str(tmp_path / "missing" / "out.csv"))


def test_main_writes_file(tmp_path, capsys):
    path = tmp_path / "cpg.csv"
    assert main(["--output", str(path), "--seed", "1", "--steps", "2", "--sites", "3"]) == 0
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Step,Site,State"
    assert "Step,U,M,H,F,C" in lines
    assert "CpG Site Matrix View:" in capsys.readouterr().out


def test_main_reports_open_failure(tmp_path, capsys):
    path = tmp_path / "missing" / "cpg.csv"
    assert main(["--output", str(path)]) == 1
    assert "Error opening file for writing" in capsys.readouterr().err