"""
Rendering of audit records for people and for machines.
"""

from typing import Any, Iterable, Optional

from .core.types import AuditOutcome, RoleAssignment

DEFAULT_PERMISSION_FORMAT = "{category} / {name}"


def format_record(
    record: RoleAssignment, permission_format: str = DEFAULT_PERMISSION_FORMAT
) -> list[str]:
    """Render one record as the lines of a summary block."""
    lines = [
        f"🔹 Role: {record.role_name}",
        f"   • From Group: {record.group_name}",
        f"   • Group Path: {record.path_display}",
        f"   • Context: {record.context_label}",
        "   • Permissions:",
    ]
    lines.extend(
        f"       - {permission.display(permission_format)}"
        for permission in record.permissions
    )
    lines.append("")
    return lines


def format_summary(
    username: str,
    records: Iterable[RoleAssignment],
    item_label: str,
    permission_format: str = DEFAULT_PERMISSION_FORMAT,
    outcome: Optional[AuditOutcome] = None,
) -> str:
    """
    Render the role and permission summary for a user.

    Args:
        username: Audited user
        records: Records returned by a scan
        item_label: Item (or root label) the scan started from
        permission_format: Template applied to each permission
        outcome: Scan outcome, used to word the empty result

    Returns:
        The summary text, ending with a newline
    """
    records = list(records)
    if not records:
        if outcome is AuditOutcome.NO_GROUPS:
            return f"❌ User '{username}' is not a member of any configured group in '{item_label}'.\n"
        return (
            f"❌ No roles found for user '{username}' in '{item_label}' "
            "or inherited contexts.\n"
        )

    lines = [
        f"RBAC Role & Permission Summary for '{username}' in '{item_label}' "
        "(including inherited scopes):",
        "",
    ]
    for record in records:
        lines.extend(format_record(record, permission_format))
    return "\n".join(lines) + "\n"


def record_to_dict(
    record: RoleAssignment, permission_format: str = DEFAULT_PERMISSION_FORMAT
) -> dict[str, Any]:
    return {
        "role": record.role_name,
        "group": record.group_name,
        "group_path": record.path_display,
        "groups": list(reversed(record.path)),
        "context": record.context_label,
        "permissions": [
            permission.display(permission_format) for permission in record.permissions
        ],
    }


def records_to_dicts(
    records: Iterable[RoleAssignment], permission_format: str = DEFAULT_PERMISSION_FORMAT
) -> list[dict[str, Any]]:
    """JSON-ready representation of a list of records."""
    return [record_to_dict(record, permission_format) for record in records]


__all__ = ["format_record", "format_summary", "record_to_dict", "records_to_dicts"]
