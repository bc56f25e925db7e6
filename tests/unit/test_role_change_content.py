"""Unit tests for role change notification text."""

from societyhub.application.notifications.role_change_content import (
    NO_CHANGES_MESSAGE,
    build_role_change_content,
    format_role_names,
    summarize_role_changes,
)


def test_format_role_names() -> None:
    assert format_role_names([]) == ""
    assert format_role_names(["Treasurer"]) == '"Treasurer"'
    assert format_role_names(["A", "B"]) == '"A" and "B"'
    assert format_role_names(["A", "B", "C"]) == '"A", "B" and "C"'


def test_single_role_added() -> None:
    content = build_role_change_content("Robotics Society", ["Treasurer"], [])

    assert content.title == "New Role Assigned in Robotics Society"
    assert 'the role of "Treasurer" in "Robotics Society"' in content.description
    assert "this role" in content.description


def test_multiple_roles_added() -> None:
    content = build_role_change_content("Robotics Society", ["President", "Treasurer"], [])

    assert content.title == "New Roles Assigned in Robotics Society"
    assert '"President" and "Treasurer"' in content.description
    assert "these roles" in content.description


def test_single_role_removed() -> None:
    content = build_role_change_content("Robotics Society", [], ["Treasurer"])

    assert content.title == "Role Removed in Robotics Society"
    assert content.description == (
        'You have been removed from the role of "Treasurer" in "Robotics Society".'
    )


def test_all_additional_roles_removed_mentions_baseline() -> None:
    content = build_role_change_content(
        "Robotics Society", [], ["President", "Treasurer"], remaining_count=0
    )

    assert content.title == "Roles Removed in Robotics Society"
    assert "All your additional roles" in content.description
    assert "basic Member role" in content.description


def test_some_roles_removed_with_roles_remaining() -> None:
    content = build_role_change_content(
        "Robotics Society", [], ["President", "Treasurer"], remaining_count=1
    )

    assert '"President" and "Treasurer"' in content.description
    assert "All your additional roles" not in content.description


def test_mixed_changes() -> None:
    content = build_role_change_content("Robotics Society", ["President"], ["Treasurer"])

    assert content.title == "Role Changes in Robotics Society"
    assert 'assigned "President" role and removed from "Treasurer" role' in content.description


def test_no_changes_returns_none() -> None:
    assert build_role_change_content("Robotics Society", [], []) is None


def test_summarize_role_changes() -> None:
    assert summarize_role_changes(0, 0) == NO_CHANGES_MESSAGE
    assert summarize_role_changes(1, 0) == "1 role added"
    assert summarize_role_changes(0, 3) == "3 roles removed"
    assert summarize_role_changes(2, 1) == "2 roles added, 1 role removed"
