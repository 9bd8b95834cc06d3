"""Unit tests for etree command-line argument parsing."""

from pathlib import Path

import pytest

from etree.cli.argparser import build_config, create_parser, normalize_switches, validate_args
from etree.file_system_tree.permission_action import PermissionAction


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    """Test the values used when no options are given."""
    args = parser.parse_args([])

    assert args.directory == "."
    assert not args.dirs_only
    assert not args.all
    assert args.exclude_pattern == ""
    assert args.exclude_from == []
    assert not args.size
    assert not args.permissions
    assert args.level == 0
    assert not args.no_color
    assert not args.no_rtl
    assert not args.ascii
    assert args.follow_symlinks
    assert args.permission_action == "ignore"
    assert args.output is None


def test_short_options(parser):
    args = parser.parse_args(["-d", "-a", "-s", "-p", "-nc", "-A", "-L", "-I", "*.tmp", "-o", "out.tsv", "src"])

    assert args.dirs_only and args.all and args.size and args.permissions
    assert args.no_color and args.ascii and args.follow_symlinks
    assert args.exclude_pattern == "*.tmp"
    assert args.output == Path("out.tsv")
    assert args.directory == "src"


@pytest.mark.parametrize(
    "argv,level",
    [
        (["-l"], 1),
        (["-l2"], 2),
        (["-l", "3"], 3),
        (["--level", "4"], 4),
        (["--level=-1"], -1),
        (["-l", "src"], None),
    ],
)
def test_level(parser, argv, level):
    """Test -l with and without a value."""
    if level is None:
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(argv)
        assert exc_info.value.code == 2
    else:
        assert parser.parse_args(argv).level == level


def test_level_before_directory(parser):
    args = parser.parse_args(["src", "-l"])
    assert args.level == 1
    assert args.directory == "src"


def test_attached_pattern(parser):
    assert parser.parse_args(["-I*.tmp"]).exclude_pattern == "*.tmp"


def test_repeated_rules_files(parser):
    args = parser.parse_args(["-e", ".gitignore", "-e", "extra"])
    assert args.exclude_from == [Path(".gitignore"), Path("extra")]


def test_permission_action_choices(parser):
    assert parser.parse_args(["-P", "warn"]).permission_action == "warn"
    with pytest.raises(SystemExit):
        parser.parse_args(["-P", "raise"])


@pytest.mark.parametrize("flag", ["-?", "--help"])
def test_help(parser, flag, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args([flag])
    assert exc_info.value.code == 0
    assert "usage: etree" in capsys.readouterr().out


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-v"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("etree ")


def test_unknown_option(parser):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--bogus"])
    assert exc_info.value.code == 2


def test_normalize_switches_windows():
    """Test rewriting of slash switches on Windows."""
    argv = ["/a", "/d", "/l2", "/I*.tmp", "/nc", "/o", "C:\\out.tsv", "/?", "C:\\data"]
    assert normalize_switches(argv, windows=True) == [
        "-a",
        "-d",
        "-l2",
        "-I*.tmp",
        "-nc",
        "-o",
        "C:\\out.tsv",
        "-?",
        "C:\\data",
    ]


def test_normalize_switches_leaves_other_arguments():
    assert normalize_switches(["/data", "/x", "-s"], windows=True) == ["/data", "/x", "-s"]
    assert normalize_switches(["/a", "/l2"], windows=False) == ["/a", "/l2"]


def test_validate_args(tmp_path, parser):
    """Test directory and rules file validation."""
    validate_args(parser.parse_args([str(tmp_path)]))

    with pytest.raises(ValueError, match="Directory does not exist"):
        validate_args(parser.parse_args([str(tmp_path / "missing")]))

    file_path = tmp_path / "file.txt"
    file_path.write_text("x")
    with pytest.raises(ValueError, match="Not a directory"):
        validate_args(parser.parse_args([str(file_path)]))

    with pytest.raises(ValueError, match="Rules file not found"):
        validate_args(parser.parse_args([str(tmp_path), "-e", str(tmp_path / "missing")]))


def test_build_config(parser):
    """Test the translation of arguments into a configuration."""
    args = parser.parse_args(["-a", "-s", "-l2", "-I", "*.tmp", "-e", "rules", "-P", "warn", "--no-rtl", "src"])
    config = build_config(args, interactive=True)

    assert config.root == "src"
    assert config.include_hidden
    assert config.show_size
    assert config.depth_limit == 2
    assert config.exclude_pattern == "*.tmp"
    assert config.ignore_files == (Path("rules"),)
    assert config.permission_action is PermissionAction.WARN
    assert config.use_colors
    assert not config.shape_rtl
    assert not config.export_mode


def test_build_config_terminal_dependent(parser):
    """Test that colours and shaping follow the terminal."""
    piped = build_config(parser.parse_args([]), interactive=False)
    assert not piped.use_colors
    assert not piped.shape_rtl

    no_color = build_config(parser.parse_args(["-nc"]), interactive=True)
    assert not no_color.use_colors
    assert no_color.shape_rtl


def test_build_config_export_and_level(parser):
    config = build_config(parser.parse_args(["-o", "out.tsv", "--level=-5"]), interactive=False)
    assert config.export_mode
    assert config.depth_limit == 0


def test_symlink_options(parser):
    """Test that links are followed unless --no-follow is given."""
    assert parser.parse_args([]).follow_symlinks
    assert parser.parse_args(["-L"]).follow_symlinks
    assert not parser.parse_args(["--no-follow"]).follow_symlinks
    assert not build_config(parser.parse_args(["--no-follow"]), interactive=False).follow_symlinks
