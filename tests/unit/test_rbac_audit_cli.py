"""
Unit tests for the rbac-audit console script.
"""

import os
import sys
from unittest.mock import patch

import pytest

from rbac_audit.bin.rbac_audit import main

pytestmark = pytest.mark.unit


class TestRbacAuditCli:
    @patch("rbac_audit.bin.rbac_audit.execute_from_command_line")
    def test_main_injects_subcommand(self, mock_execute):
        argv = ["rbac-audit", "alice", "--item", "team-a/deploy"]
        with patch.object(sys, "argv", argv):
            main()

        args, _ = mock_execute.call_args
        assert args[0] == ["rbac-audit", "audit_user_roles", "alice", "--item", "team-a/deploy"]

    @patch("rbac_audit.bin.rbac_audit.execute_from_command_line")
    def test_main_sets_default_settings_module(self, mock_execute):
        with patch.dict(os.environ, {}, clear=True):
            with patch.object(sys, "argv", ["rbac-audit", "alice"]):
                main()
            assert os.environ["DJANGO_SETTINGS_MODULE"] == "rbac_audit.conf.settings"

    @patch("rbac_audit.bin.rbac_audit.execute_from_command_line")
    def test_main_keeps_existing_settings_module(self, mock_execute):
        with patch.dict(os.environ, {"DJANGO_SETTINGS_MODULE": "project.settings"}):
            with patch.object(sys, "argv", ["rbac-audit", "--help"]):
                main()
            assert os.environ["DJANGO_SETTINGS_MODULE"] == "project.settings"

        args, _ = mock_execute.call_args
        assert args[0] == ["rbac-audit", "audit_user_roles", "--help"]
