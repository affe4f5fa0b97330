import logging
import os
import re
from datetime import date
from pathlib import Path

logger = logging.getLogger(__name__)

VERSIONS_DIR = Path(__file__).resolve().parents[2] / "alembic" / "versions"


def date_serial_revision_id(
    versions_dir: str | os.PathLike = VERSIONS_DIR,
    today: date | None = None,
) -> str:
    """Next revision id in YYYY_MM_DD_NNN form, one past the day's highest serial."""
    date_str = (today or date.today()).strftime("%Y_%m_%d")
    pattern = re.compile(rf"^{date_str}_(\d{{3}})_")

    max_serial = 0
    if os.path.isdir(versions_dir):
        for fname in os.listdir(versions_dir):
            m = pattern.match(fname)
            if m:
                max_serial = max(max_serial, int(m.group(1)))

    return f"{date_str}_{max_serial + 1:03d}"


def make_revision_hook(versions_dir: str | os.PathLike = VERSIONS_DIR):
    """Build the `process_revision_directives` hook used by alembic/env.py."""

    def process_revision_directives(context, revision, directives):
        if not directives:
            return
        script = directives[0]

        cmd_opts = getattr(context.config, "cmd_opts", None)
        if getattr(cmd_opts, "autogenerate", False) and script.upgrade_ops.is_empty():
            # nothing changed in the models, so no file is written
            directives[:] = []
            logger.info("No schema changes detected, skipping revision")
            return

        script.rev_id = date_serial_revision_id(versions_dir)

    return process_revision_directives
