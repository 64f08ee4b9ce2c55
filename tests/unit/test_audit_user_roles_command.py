"""
Unit tests for the audit_user_roles management command.
"""

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

pytestmark = pytest.mark.unit


@pytest.fixture
def snapshot_file(tmp_path, snapshot_payload):
    path = tmp_path / "rbac.json"
    path.write_text(json.dumps(snapshot_payload), encoding="utf-8")
    return str(path)


def _run(*args, **options):
    out, err = StringIO(), StringIO()
    call_command("audit_user_roles", *args, stdout=out, stderr=err, **options)
    return out.getvalue(), err.getvalue()


def test_item_walk_reports_inherited_roles(snapshot_file):
    out, err = _run("alice", item="team-a/deploy", snapshot=snapshot_file)

    assert "Gathering RBAC roles for user 'alice' in item 'team-a/deploy'" in out
    assert "🔹 Role: Deployer" in out
    assert "   • Group Path: release → team" in out
    assert "   • Context: team-a" in out
    assert "🔹 Role: Reader" in out
    assert "   • Group Path: everyone → developers" in out
    assert "   • Context: <root>" in out
    assert "Ghost" in err


def test_root_item_runs_root_check_only(snapshot_file):
    out, _ = _run("alice", snapshot=snapshot_file)

    assert "🔹 Role: Reader" in out
    assert "Deployer" not in out


def test_root_check_flag_adds_root_report(snapshot_file):
    out, _ = _run("alice", item="team-a", snapshot=snapshot_file, root_check=True)

    assert out.count("🔹 Role: Reader") == 2


def test_json_output(snapshot_file):
    out, _ = _run("alice", item="team-a/deploy", snapshot=snapshot_file, format="json")

    payload = json.loads(out)
    assert payload["username"] == "alice"
    assert payload["item"] == "team-a/deploy"
    assert "root_check" not in payload
    scan = payload["item_scan"]
    assert scan["outcome"] == "found"
    assert [role["role"] for role in scan["roles"]] == ["Deployer", "Reader"]
    assert scan["unresolved_roles"] == ["Ghost"]


def test_user_without_groups(snapshot_file):
    out, _ = _run("mallory", item="team-a", snapshot=snapshot_file)

    assert "❌ User 'mallory' is not a member of any configured group in 'team-a'" in out


def test_unknown_item_is_a_command_error(snapshot_file):
    with pytest.raises(CommandError, match="Item not found"):
        _run("alice", item="team-b/job", snapshot=snapshot_file)


def test_snapshot_path_is_required():
    with pytest.raises(CommandError, match="snapshot path"):
        _run("alice")


def test_snapshot_path_from_settings(snapshot_file):
    settings_override = {"directory_settings": {"snapshot_path": snapshot_file}}
    with override_settings(RBAC_AUDIT=settings_override):
        out, _ = _run("root")

    assert "🔹 Role: Admin" in out


def test_unreadable_snapshot_is_a_command_error(tmp_path):
    with pytest.raises(CommandError, match="Could not read snapshot"):
        _run("alice", snapshot=str(tmp_path / "missing.json"))


def test_root_only_ignores_the_item_walk(snapshot_file):
    out, _ = _run("alice", item="team-a/deploy", snapshot=snapshot_file, root_only=True)

    assert "in item 'team-a/deploy'" in out
    assert "🔹 Role: Reader" in out
    assert "   • Context: <root>" in out
    assert "Deployer" not in out


def test_include_root_check_setting_adds_root_report(snapshot_file):
    with override_settings(RBAC_AUDIT={"audit_settings": {"include_root_check": True}}):
        out, _ = _run("alice", item="team-a", snapshot=snapshot_file, format="json")

    payload = json.loads(out)
    assert payload["item_scan"]["outcome"] == "found"
    assert [role["role"] for role in payload["root_check"]["roles"]] == ["Reader"]


@pytest.fixture
def labelled_snapshot_file(tmp_path, snapshot_payload):
    path = tmp_path / "labelled.json"
    path.write_text(json.dumps(dict(snapshot_payload, root_label="Jenkins")), encoding="utf-8")
    return str(path)


def test_snapshot_root_label_is_used(labelled_snapshot_file):
    out, _ = _run("alice", item="team-a", snapshot=labelled_snapshot_file)

    assert "   • Context: Jenkins" in out


def test_configured_root_label_wins_over_snapshot(labelled_snapshot_file):
    with override_settings(RBAC_AUDIT={"audit_settings": {"root_label": "Controller"}}):
        out, _ = _run("alice", snapshot=labelled_snapshot_file)

    assert "in item 'Controller'" in out
    assert "   • Context: Controller" in out
