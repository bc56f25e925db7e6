"""Text for role change notifications and responses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationContent:
    """Title and body of a role change notification."""

    title: str
    description: str


def format_role_names(names: list[str]) -> str:
    """Quote and join names: '"A"', '"A" and "B"', '"A", "B" and "C"'."""
    quoted = [f'"{name}"' for name in names]
    if len(quoted) <= 1:
        return "".join(quoted)
    return f"{', '.join(quoted[:-1])} and {quoted[-1]}"


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def build_role_change_content(
    society_name: str,
    added: list[str],
    removed: list[str],
    remaining_count: int = 0,
    baseline_name: str = "Member",
) -> NotificationContent | None:
    """Build notification text for added and removed role names.

    ``remaining_count`` is the number of non-baseline roles the student still
    holds; zero after several removals yields the "all roles removed" text.
    Returns ``None`` when nothing changed.
    """
    if added and removed:
        return NotificationContent(
            title=f"Role Changes in {society_name}",
            description=(
                f'Your roles in "{society_name}" have been updated. '
                f"You've been assigned {format_role_names(added)} "
                f"{_plural(len(added), 'role', 'roles')} and removed from "
                f"{format_role_names(removed)} {_plural(len(removed), 'role', 'roles')}."
            ),
        )
    if added:
        many = len(added) > 1
        return NotificationContent(
            title=f"New Role{'s' if many else ''} Assigned in {society_name}",
            description=(
                f"You have been assigned the {'roles' if many else 'role'} of "
                f'{format_role_names(added)} in "{society_name}". You can now access '
                "the features and responsibilities linked to "
                f"{'these roles' if many else 'this role'}."
            ),
        )
    if removed:
        if len(removed) == 1:
            return NotificationContent(
                title=f"Role Removed in {society_name}",
                description=(
                    f'You have been removed from the role of "{removed[0]}" '
                    f'in "{society_name}".'
                ),
            )
        if remaining_count == 0:
            description = (
                f'All your additional roles in "{society_name}" have been removed. '
                f"You remain a member of the society with the basic {baseline_name} role."
            )
        else:
            description = (
                f"You have been removed from the roles of {format_role_names(removed)} "
                f'in "{society_name}".'
            )
        return NotificationContent(
            title=f"Roles Removed in {society_name}", description=description
        )
    return None


NO_CHANGES_MESSAGE = "No changes to student roles."


def summarize_role_changes(added: int, removed: int) -> str:
    """Human-readable summary such as '2 roles added, 1 role removed'."""
    parts = []
    if added:
        parts.append(f"{added} {_plural(added, 'role', 'roles')} added")
    if removed:
        parts.append(f"{removed} {_plural(removed, 'role', 'roles')} removed")
    if not parts:
        return NO_CHANGES_MESSAGE
    return ", ".join(parts)
