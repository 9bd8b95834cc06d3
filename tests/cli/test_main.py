"""Unit tests for the etree command-line entry point."""

from unittest.mock import patch

import pytest

from etree.cli.main import is_interactive, main, needs_bom
from etree.output.tsv_export import read_tsv


@pytest.fixture(autouse=True)
def no_signal_setup():
    """Keep the test session's own signal handlers in place."""
    with patch("etree.cli.main.setup_signal_handling"):
        yield


@pytest.fixture
def run_main(tmp_path):
    """Run main with stdout redirected to a file and return what was written."""
    out_path = tmp_path / "stdout.txt"

    def run(argv):
        with open(out_path, "w", encoding="utf-8") as out, patch("sys.stdout", out):
            main(argv)
        return out_path.read_bytes().decode("utf-8")

    return run


def test_render(sample_tree, run_main):
    """Test the drawn tree followed by a blank line and the summary."""
    output = run_main([str(sample_tree)])

    assert output == (
        f"{sample_tree}\n"
        "├── a\n"
        "│   └── f.txt\n"
        "└── b.tmp\n"
        "\n"
        "The tree counts 2 layers, 1 folders, 2 files.\n"
    )


def test_render_options(sample_tree, run_main):
    """Test exclusion, sizes and plain output when not on a terminal."""
    output = run_main(["-I", "*.tmp", "-s", str(sample_tree)])

    assert "\033" not in output
    assert "    └── f.txt [10 B]\n" in output
    assert "b.tmp" not in output
    assert output.endswith("The tree counts 2 layers, 1 folders, 1 files.\n")


def test_level_option(sample_tree, run_main):
    output = run_main([str(sample_tree), "-l"])
    assert "f.txt" not in output
    assert output.endswith("The tree counts 1 layers, 1 folders, 1 files.\n")


def test_export(sample_tree, tmp_path, run_main):
    """Test that export mode writes the file and prints nothing."""
    export_path = tmp_path / "files.tsv"

    output = run_main(["-o", str(export_path), str(sample_tree)])

    assert output == ""
    rows = read_tsv(export_path)
    assert [row.relative_path for row in rows] == ["a", "a/f.txt", "b.tmp"]
    assert rows[1].size == 10


def test_export_failure(sample_tree, tmp_path, run_main, capsys):
    """Test that an unwritable export file is an error with exit code 1."""
    with pytest.raises(SystemExit) as exc_info:
        run_main(["-o", str(tmp_path / "missing" / "files.tsv"), str(sample_tree)])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("Error: Could not write to file ")


def test_missing_directory(tmp_path, run_main, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main([str(tmp_path / "missing")])

    assert exc_info.value.code == 1
    assert "Error: Directory does not exist" in capsys.readouterr().err


def test_missing_rules_file(sample_tree, tmp_path, run_main, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(["-e", str(tmp_path / "nope"), str(sample_tree)])

    assert exc_info.value.code == 1
    assert "Error: Rules file not found" in capsys.readouterr().err


def test_rules_file(sample_tree, tmp_path, run_main):
    rules = tmp_path / "rules"
    rules.write_text("a/\n", encoding="utf-8")

    output = run_main(["-e", str(rules), str(sample_tree)])

    assert "f.txt" not in output
    assert "└── b.tmp\n" in output


def test_syntax_error_exit_code(run_main):
    with pytest.raises(SystemExit) as exc_info:
        run_main(["--bogus"])
    assert exc_info.value.code == 2


def test_exit_code_after_signal(sample_tree, run_main):
    """Test that a received signal determines the exit code."""
    with patch("etree.cli.main.signal_handler") as mock_handler:
        mock_handler.exit_code.return_value = 130
        with pytest.raises(SystemExit) as exc_info:
            run_main([str(sample_tree)])
    assert exc_info.value.code == 130


def test_broken_pipe_is_quiet(sample_tree, run_main, capsys):
    """Test that a closed output pipe ends the run without an error message."""
    with patch("etree.cli.main.SafeWriter.write", side_effect=BrokenPipeError()):
        output = run_main([str(sample_tree)])

    assert output == ""
    assert capsys.readouterr().err == ""


def test_is_interactive():
    with patch("sys.stdout") as mock_stdout:
        mock_stdout.isatty.return_value = True
        assert is_interactive()
        mock_stdout.isatty.side_effect = ValueError("closed")
        assert not is_interactive()


@pytest.mark.parametrize(
    "interactive,windows,expected",
    [(False, True, True), (True, True, False), (False, False, False), (True, False, False)],
)
def test_needs_bom(interactive, windows, expected):
    assert needs_bom(interactive, windows=windows) is expected


def test_bom_before_redirected_output(sample_tree, run_main):
    """Test that the byte-order mark precedes the tree when one is needed."""
    with patch("etree.cli.main.needs_bom", return_value=True):
        output = run_main([str(sample_tree)])

    assert output.startswith(f"\ufeff{sample_tree}\n")
    assert output.count("\ufeff") == 1
