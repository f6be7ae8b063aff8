"""Driver tests: argument handling, error exits and file output."""

import errno
import os
import subprocess
import sys

import pytest

from prngseq import cli


def _lcg_doubles(seed, n):
    state = seed
    values = []
    for _ in range(n):
        state = (1664525 * state + 1013904223) % 2**32
        values.append(state / 2**32)
    return values


def test_lcg_end_to_end(tmp_path):
    out = tmp_path / "lcg.csv"

    assert cli.main(["lcg", "42", "5", str(out)]) == 0

    lines = out.read_text().splitlines()
    assert len(lines) == 6
    assert lines[0] == "x"
    values = [float(line) for line in lines[1:]]
    assert values == _lcg_doubles(42, 5)
    assert all(0.0 <= v < 1.0 for v in values)


def test_zero_count_writes_header_only(tmp_path):
    out = tmp_path / "empty.csv"
    assert cli.main(["xorshift32", "0", "0", str(out)]) == 0
    assert out.read_text() == "x\n"


def test_existing_output_is_truncated(tmp_path):
    out = tmp_path / "seq.csv"
    out.write_text("stale\n" * 50)
    assert cli.main(["randu", "1", "2", str(out)]) == 0
    assert out.read_text().splitlines()[0] == "x"
    assert len(out.read_text().splitlines()) == 3


def test_unknown_generator_leaves_output_untouched(tmp_path, capsys):
    existing = tmp_path / "keep.csv"
    existing.write_text("keep\n")
    missing = tmp_path / "never.csv"

    assert cli.main(["pcg64", "1", "10", str(existing)]) == 1
    assert cli.main(["LCG", "1", "10", str(missing)]) == 1

    assert existing.read_text() == "keep\n"
    assert not missing.exists()
    err = capsys.readouterr().err
    assert "Unknown generator: pcg64" in err
    assert "Unknown generator: LCG" in err


def test_unopenable_output_reports_path(tmp_path, capsys):
    target = tmp_path / "no" / "such" / "dir" / "out.csv"
    assert cli.main(["lcg", "1", "3", str(target)]) == 1
    assert str(target) in capsys.readouterr().err


def test_write_failure_reports_and_removes_partial_file(tmp_path, monkeypatch, capsys):
    out = tmp_path / "partial.csv"

    def failing_write(generator, sink):
        sink.write("x\n0.5\n")
        raise OSError(errno.ENOSPC, "No space left on device")

    monkeypatch.setattr(cli, "write_sequence", failing_write)

    assert cli.main(["lcg", "1", "10", str(out)]) == 1
    assert not out.exists()
    err = capsys.readouterr().err
    assert str(out) in err
    assert "No space left on device" in err


@pytest.mark.skipif(not os.path.exists("/dev/full"), reason="needs /dev/full")
def test_full_device_exits_with_diagnostic(capsys):
    assert cli.main(["lcg", "1", "100000", "/dev/full"]) == 1
    assert "/dev/full" in capsys.readouterr().err
    assert os.path.exists("/dev/full")


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["lcg"],
        ["lcg", "1", "5"],
        ["lcg", "abc", "5", "out.csv"],
        ["lcg", "1", "-5", "out.csv"],
        ["lcg", "-1", "5", "out.csv"],
        ["lcg", str(2**64), "5", "out.csv"],
    ],
)
def test_bad_arguments_exit_before_writing(argv, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    assert exc_info.value.code != 0
    assert "usage:" in capsys.readouterr().err
    assert not (tmp_path / "out.csv").exists()


def test_largest_seed_is_accepted(tmp_path):
    out = tmp_path / "wide.csv"
    assert cli.main(["mt19937", str(2**64 - 1), "3", str(out)]) == 0
    assert len(out.read_text().splitlines()) == 4


def test_format_option(tmp_path):
    out = tmp_path / "fmt.csv"
    assert cli.main(["randu", "1", "1", str(out), "--format", ".6g"]) == 0
    assert out.read_text() == "x\n3.0519e-05\n"


def test_lcg_constant_options(tmp_path):
    out = tmp_path / "minstd.csv"
    argv = ["lcg", "1", "2", str(out), "--multiplier", "16807", "--increment", "0", "--modulus", str(2**31 - 1)]
    assert cli.main(argv) == 0
    values = [float(line) for line in out.read_text().splitlines()[1:]]
    assert values == [16807 / (2**31 - 1), 282475249 / (2**31 - 1)]


def test_lcg_options_rejected_for_other_generators(tmp_path, capsys):
    out = tmp_path / "randu.csv"
    assert cli.main(["randu", "1", "2", str(out), "--multiplier", "3"]) == 1
    assert "invalid configuration for randu" in capsys.readouterr().err
    assert not out.exists()


def test_invalid_modulus_rejected(tmp_path):
    out = tmp_path / "lcg.csv"
    assert cli.main(["lcg", "1", "2", str(out), "--modulus", "0"]) == 1
    assert not out.exists()


def test_module_entry_point(tmp_path):
    out = tmp_path / "module.csv"
    result = subprocess.run(
        [sys.executable, "-m", "prngseq", "xorshift32", "1", "2", str(out)],
        check=False,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert out.read_text().splitlines() == ["x", repr(270369 / 0xFFFFFFFF), repr(67634689 / 0xFFFFFFFF)]
