"""Unit tests for the permission_action module."""

from etree.file_system_tree.permission_action import PermissionAction


def test_permission_action_enum():
    """Test the PermissionAction enum values."""
    assert PermissionAction.IGNORE == "ignore"
    assert PermissionAction.WARN == "warn"
    assert PermissionAction("warn") is PermissionAction.WARN
    assert [action.value for action in PermissionAction] == ["ignore", "warn"]
