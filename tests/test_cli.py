import pytest

from epinet.cli import main


def test_runs_requested_steps(capsys):
    assert main(["--steps", "3", "--delay", "0", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Starting simulation of epigenetic modifications...")
    lines = out.splitlines()
    assert [line for line in lines if line.startswith("Step ")] == [
        "Step 0",
        "Step 1",
        "Step 2",
    ]
    assert lines.count("Epigenetic Network State:") == 3


def test_first_step_all_unmethylated(capsys):
    main(["--steps", "1", "--delay", "0"])
    out = capsys.readouterr().out
    assert "Unmethylated: 10" in out
    assert "Site CpG_10: U" in out


def test_only_source_sites_can_change(capsys):
    main(["--steps", "6", "--delay", "0", "--seed", "3"])
    lines = capsys.readouterr().out.splitlines()
    for i in range(3, 11):
        assert f"Site CpG_{i}: M" not in lines


def test_negative_delay_rejected():
    with pytest.raises(SystemExit):
        main(["--delay", "-1"])