"""
Management command auditing a user's RBAC roles on an item.
"""

import json
import logging
from typing import Any, Optional

from django.core.management.base import BaseCommand, CommandError

from rbac_audit.config_proxy import get_setting
from rbac_audit.core import AuditSession, ContextNotFound, SnapshotError
from rbac_audit.core.walker import run_root_audit, run_user_audit
from rbac_audit.directory.base import normalize_item_path
from rbac_audit.directory.factory import get_directory_backend
from rbac_audit.reporting import format_summary, records_to_dicts

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Show every role a user holds on an item, the group path it is inherited
    through and the context it is assigned in.
    """

    help = "Audit a user's RBAC roles and permissions on an item and all inherited scopes."

    def add_arguments(self, parser):
        parser.add_argument("username", help="User to audit")
        parser.add_argument(
            "--item",
            default="/",
            help="Full item path, e.g. 'team-a/deploy'. '/' audits the root only.",
        )
        parser.add_argument(
            "--snapshot",
            default=None,
            help="Directory snapshot file (defaults to directory_settings.snapshot_path)",
        )
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format (text or json)",
        )
        parser.add_argument(
            "--root-only",
            action="store_true",
            help="Only run the root container check",
        )
        parser.add_argument(
            "--root-check",
            action="store_true",
            help="Also run the root container check after the item walk",
        )

    def handle(self, *args, **options):
        username = options["username"]
        separator = get_setting("audit_settings.item_separator")
        item_path = normalize_item_path(options["item"], separator)
        path_separator = get_setting("audit_settings.path_separator")
        logger.debug("Auditing user %s on %s", username, item_path or "/")

        try:
            directory = get_directory_backend(options["snapshot"])
        except (SnapshotError, ValueError, ImportError) as exc:
            raise CommandError(str(exc)) from exc

        root_label = directory.get_root_context().label
        walk_session: Optional[AuditSession] = None
        if item_path and not options["root_only"]:
            try:
                walk_session = run_user_audit(username, item_path, directory, path_separator)
            except ContextNotFound as exc:
                raise CommandError(str(exc)) from exc

        root_session: Optional[AuditSession] = None
        if walk_session is None or options["root_check"] or get_setting(
            "audit_settings.include_root_check", False
        ):
            root_session = run_root_audit(username, directory, path_separator)

        item_label = item_path or root_label
        if options["format"] == "json":
            self._write_json(username, item_label, walk_session, root_session)
        else:
            self._write_text(username, item_label, root_label, walk_session, root_session)

    def _write_text(
        self,
        username: str,
        item_label: str,
        root_label: str,
        walk_session: Optional[AuditSession],
        root_session: Optional[AuditSession],
    ) -> None:
        permission_format = get_setting("audit_settings.permission_format")
        self.stdout.write(
            f"Gathering RBAC roles for user '{username}' in item '{item_label}' "
            "and all inherited scopes..."
        )
        for label, session in ((item_label, walk_session), (root_label, root_session)):
            if session is None:
                continue
            self.stdout.write(
                format_summary(
                    username,
                    session.records,
                    label,
                    permission_format=permission_format,
                    outcome=session.outcome,
                ),
                ending="",
            )
            for failure in session.failures.values():
                self.stderr.write(self.style.WARNING(f"⚠️ {failure}"))

    def _write_json(
        self,
        username: str,
        item_label: str,
        walk_session: Optional[AuditSession],
        root_session: Optional[AuditSession],
    ) -> None:
        payload: dict[str, Any] = {"username": username, "item": item_label}
        if walk_session is not None:
            payload["item_scan"] = self._session_payload(walk_session)
        if root_session is not None:
            payload["root_check"] = self._session_payload(root_session)
        self.stdout.write(json.dumps(payload, indent=2, ensure_ascii=False))

    def _session_payload(self, session: AuditSession) -> dict[str, Any]:
        permission_format = get_setting("audit_settings.permission_format")
        return {
            "outcome": session.outcome.value,
            "roles": records_to_dicts(session.records, permission_format),
            "unresolved_roles": sorted(session.failures),
        }
