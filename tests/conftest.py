import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "rbac_audit.conf.test_settings")
django.setup()


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


@pytest.fixture
def snapshot_payload():
    """A folder tree with nested groups at the root and at team-a."""
    return {
        "root_label": "<root>",
        "roles": {
            "Admin": [{"category": "Overall", "name": "Administer"}],
            "Reader": [
                {"category": "Overall", "name": "Read"},
                {"category": "Job", "name": "Read"},
            ],
            "Deployer": ["Job / Build", "Job / Cancel"],
        },
        "contexts": {
            "": {
                "groups": [
                    {"name": "everyone", "members": [], "groups": ["developers"], "roles": ["Reader"]},
                    {"name": "developers", "members": ["alice", "bob"], "roles": []},
                    {"name": "admins", "members": ["root"], "roles": ["Admin"]},
                ]
            },
            "team-a": {
                "groups": [
                    {"name": "release", "groups": ["team"], "roles": ["Deployer"]},
                    {"name": "team", "members": ["alice"], "roles": ["Ghost"]},
                ]
            },
            "team-a/deploy": None,
        },
    }
