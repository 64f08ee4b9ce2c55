"""
Unit tests for summary and JSON rendering.
"""

import pytest

from rbac_audit.core import AuditOutcome, PermissionDescriptor, RoleAssignment
from rbac_audit.reporting import format_summary, records_to_dicts

pytestmark = pytest.mark.unit


@pytest.fixture
def record():
    return RoleAssignment(
        role_name="Deployer",
        group_name="release",
        path=("team", "release"),
        path_display="release → team",
        context_label="team-a",
        permissions=(PermissionDescriptor("Job", "Build"), PermissionDescriptor("Job", "Cancel")),
    )


def test_summary_lists_each_record(record):
    text = format_summary("alice", [record], "team-a/deploy")

    assert "RBAC Role & Permission Summary for 'alice' in 'team-a/deploy'" in text
    assert "🔹 Role: Deployer" in text
    assert "   • From Group: release" in text
    assert "   • Group Path: release → team" in text
    assert "   • Context: team-a" in text
    assert "       - Job / Build" in text
    assert text.endswith("\n")


def test_summary_uses_permission_format(record):
    text = format_summary("alice", [record], "x", permission_format="{category}:{name}")

    assert "       - Job:Cancel" in text


def test_empty_summary_depends_on_outcome():
    no_roles = format_summary("alice", [], "team-a")
    no_groups = format_summary("alice", [], "team-a", outcome=AuditOutcome.NO_GROUPS)

    assert "No roles found for user 'alice' in 'team-a'" in no_roles
    assert "is not a member of any configured group" in no_groups


def test_records_to_dicts(record):
    assert records_to_dicts([record]) == [
        {
            "role": "Deployer",
            "group": "release",
            "group_path": "release → team",
            "groups": ["release", "team"],
            "context": "team-a",
            "permissions": ["Job / Build", "Job / Cancel"],
        }
    ]
