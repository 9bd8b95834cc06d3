"""Tests for rendering traversal events as tree lines."""

import pytest

from etree.config import TraversalConfig
from etree.file_system_tree.directory_entry import DirectoryEntry
from etree.file_system_tree.events import DirectoryEntered, DirectoryLeft, EntryVisited, EnumerationFailed
from etree.file_system_tree.traversal_stats import TraversalStats
from etree.file_system_tree.tree_walker import TreeWalker
from etree.output.tree_renderer import (
    DIR_COLOR,
    FILE_COLOR,
    PERM_COLOR,
    RESET_COLOR,
    SIZE_COLOR,
    TreeRenderer,
    format_size,
)


def render(renderer, events):
    return [line for line in (renderer.consume(event) for event in events) if line is not None]


def file_event(name, level=1, is_last=False, size=0, permissions="rw-r--r--"):
    entry = DirectoryEntry(f"/x/{name}", name, size=size, permissions=permissions)
    return EntryVisited(entry, level, is_last, name)


def dir_events(name, children, level=1, is_last=False):
    entry = DirectoryEntry(f"/x/{name}", name, is_dir=True, permissions="rwxr-xr-x")
    return [
        EntryVisited(entry, level, is_last, name),
        DirectoryEntered(entry, level + 1, is_last, name),
        *children,
        DirectoryLeft(entry, level + 1),
    ]


def test_reference_tree(sample_tree):
    """Test the plain drawing of x/a/f.txt and x/b.tmp."""
    events = list(TreeWalker(TraversalConfig(root=sample_tree)).walk(TraversalStats()))
    assert render(TreeRenderer(), events) == ["├── a", "│   └── f.txt", "└── b.tmp"]


def test_last_directory_indents_with_spaces():
    """Test that children of a last sibling get blank indentation."""
    inner = dir_events("y", [file_event("deep.txt", level=3, is_last=True)], level=2, is_last=True)
    events = [file_event("1.txt"), *dir_events("z", inner, is_last=True)]
    assert render(TreeRenderer(), events) == [
        "├── 1.txt",
        "└── z",
        "    └── y",
        "        └── deep.txt",
    ]


def test_ascii_glyphs(sample_tree):
    """Test drawing with ASCII characters."""
    events = list(TreeWalker(TraversalConfig(root=sample_tree)).walk(TraversalStats()))
    assert render(TreeRenderer(ascii_glyphs=True), events) == ["|-- a", "|   `-- f.txt", "`-- b.tmp"]


def test_colors():
    """Test that names are coloured by type when colours are on."""
    renderer = TreeRenderer(colors=True)
    lines = render(renderer, dir_events("a", [file_event("f.txt", level=2, is_last=True)]))

    assert lines[0] == f"{DIR_COLOR}├── a{RESET_COLOR}"
    assert lines[1] == f"│   {FILE_COLOR}└── f.txt{RESET_COLOR}"


def test_no_escape_codes_without_colors():
    lines = render(TreeRenderer(show_size=True, show_permissions=True), [file_event("f.txt", size=10)])
    assert "\033" not in lines[0]


def test_size_and_permission_suffixes():
    """Test the size and permission suffixes, with directories shown as 0 bytes."""
    renderer = TreeRenderer(show_size=True, show_permissions=True)
    lines = render(renderer, [*dir_events("a", []), file_event("f.txt", is_last=True, size=1_234_567)])

    assert lines == ["├── a [0 B] (rwxr-xr-x)", "└── f.txt [1,234,567 B] (rw-r--r--)"]


def test_colored_suffixes():
    renderer = TreeRenderer(colors=True, show_size=True, show_permissions=True)
    line = renderer.consume(file_event("f.txt", is_last=True, size=10))
    assert line == (
        f"{FILE_COLOR}└── f.txt{RESET_COLOR}"
        f"{SIZE_COLOR} [10 B]{RESET_COLOR}"
        f"{PERM_COLOR} (rw-r--r--){RESET_COLOR}"
    )


def test_rtl_shaping():
    """Test that names are reordered only when shaping is on."""
    event = file_event("שלום.txt", is_last=True)
    assert TreeRenderer().consume(event) == "└── שלום.txt"
    assert TreeRenderer(rtl_shaping=True).consume(event) == "└── םולש.txt"


def test_render_root():
    assert TreeRenderer().render_root("/x") == "/x"
    assert TreeRenderer(colors=True).render_root("/x") == f"{DIR_COLOR}/x{RESET_COLOR}"


def test_failures_produce_no_line():
    renderer = TreeRenderer()
    assert renderer.consume(EnumerationFailed("/x/a", 2, PermissionError(13, "Permission denied"))) is None


def test_unknown_event_rejected():
    with pytest.raises(TypeError):
        TreeRenderer().consume("not an event")


@pytest.mark.parametrize(
    "config,colors,rtl",
    [
        (TraversalConfig(), False, False),
        (TraversalConfig(interactive=True), True, True),
        (TraversalConfig(interactive=True, colors_enabled=False), False, True),
        (TraversalConfig(interactive=True, rtl_shaping=False), True, False),
        (TraversalConfig(rtl_shaping=True), False, True),
    ],
)
def test_from_config(config, colors, rtl):
    """Test that colours require a terminal and shaping follows it unless forced."""
    renderer = TreeRenderer.from_config(config)
    assert renderer.colors is colors
    assert renderer.rtl_shaping is rtl


def test_format_size():
    assert format_size(0) == "0 B"
    assert format_size(999) == "999 B"
    assert format_size(1000) == "1,000 B"
