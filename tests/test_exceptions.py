"""Tests for etree exceptions."""

from etree.exceptions import ExportError


def test_export_error():
    error = ExportError("/tmp/out.tsv", "No such file or directory")
    assert isinstance(error, Exception)
    assert error.file_path == "/tmp/out.tsv"
    assert error.reason == "No such file or directory"
    assert str(error) == "Could not write to file /tmp/out.tsv: No such file or directory"
