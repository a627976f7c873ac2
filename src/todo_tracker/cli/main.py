# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, dispatches one command and returns the
process exit status.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import CommandError, registry
from ..config import get_settings
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_store import TaskStoreError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings=None) -> int:
    if settings is None:
        settings = get_settings()

    setup_logging(
        console_level=level_from_name(getattr(settings, "log_level", "WARNING")),
        log_dir=getattr(settings, "log_dir", None),
    )

    state = create_initial_state(settings=settings)
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        reply = registry.handle(state, args)
    except CommandError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    except TaskStoreError as e:
        # Nothing was persisted; the in-memory change is dropped.
        print(f"Error saving tasks: {e}", file=sys.stderr)
        return 1

    if reply.text:
        print(reply.text, file=sys.stderr if reply.error else sys.stdout)
    return reply.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
