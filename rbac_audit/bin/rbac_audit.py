#!/usr/bin/env python
import os
import sys

from django.core.management import execute_from_command_line

DEFAULT_SETTINGS_MODULE = "rbac_audit.conf.settings"
COMMAND_NAME = "audit_user_roles"


def main():
    """Run the audit_user_roles command."""
    # This entry point is for the 'rbac-audit' command.
    # It mimics django-admin but injects our settings and subcommand.
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", DEFAULT_SETTINGS_MODULE)

    argv = sys.argv[:]
    program = argv[0] if argv else "rbac-audit"
    execute_from_command_line([program, COMMAND_NAME] + argv[1:])


if __name__ == "__main__":
    main()
