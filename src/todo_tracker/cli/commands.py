# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_api import TaskIdExhaustedError, add_task, list_tasks, remove_task
from ..tasks.task_models import MAX_TASK_ID

logger = logging.getLogger(__name__)

_TASK_ID_RE = re.compile(r"\+?[0-9]+")


@dataclass(slots=True)
class Reply:
    """What a command wants shown: text, on stderr if error, and the exit status."""

    text: str
    error: bool = False
    exit_code: int = 0


CommandHandler = Callable[[AppState, list[str]], Reply]


class CommandError(RuntimeError):
    """Aborts the invocation with a message on stderr and a non-zero status."""

    exit_code = 1


class InvalidTaskIdError(CommandError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid task id: {raw}")
        self.raw = raw


def parse_task_id(raw: str) -> int:
    """
    Accept an optional '+' and ASCII digits, within the unsigned 32-bit range.
    0 is a valid id to ask for; it just never matches a stored task.
    Leading zeros are allowed in any number.
    """
    if not _TASK_ID_RE.fullmatch(raw):
        raise InvalidTaskIdError(raw)
    # Bound the length before int(): huge digit strings hit the conversion limit.
    digits = raw.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(MAX_TASK_ID)):
        raise InvalidTaskIdError(raw)
    value = int(digits)
    if value > MAX_TASK_ID:
        raise InvalidTaskIdError(raw)
    return value


class CommandRegistry:
    """Command-word registry used by the CLI entrypoint (add, remove, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[name] = handler
        self._help[name] = (usage or name, help_text)
        for alias in aliases:
            self._handlers[alias] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def handle(self, state: AppState, argv: list[str]) -> Reply:
        """
        Dispatch ["command", "arg", ...] to its handler.
        Command words are case-sensitive. CommandError and TaskStoreError
        propagate to the caller.
        """
        if not argv:
            return Reply(self.build_usage(state.prog), error=True)

        name, args = argv[0], argv[1:]
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            return Reply(
                f"Unknown command: {name}\nAvailable commands: {', '.join(self.names())}",
                error=True,
            )

        logger.debug("Dispatching %s args=%d", name, len(args))
        return handler(state, args)

    def build_usage(self, prog: str) -> str:
        lines = [f"Usage: {prog} <command> [arguments]", "Commands:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage:<25}- {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(state: AppState, args: list[str]) -> Reply:
    usage = Reply(f"Usage: {state.prog} add <task description>", error=True)
    if not args:
        return usage

    try:
        add_task(state.task_store, " ".join(args))
    except ValueError:
        return usage
    except TaskIdExhaustedError as e:
        raise CommandError(str(e)) from e
    return Reply("Task added successfully.")


def cmd_remove(state: AppState, args: list[str]) -> Reply:
    if len(args) != 1:
        return Reply(f"Usage: {state.prog} remove <task id>", error=True)

    # Parsed before anything is loaded: a bad id never touches storage.
    task_id = parse_task_id(args[0])

    if not remove_task(state.task_store, task_id):
        return Reply(f"Task with id {task_id} not found.", error=True)
    return Reply("Task removed successfully.")


def cmd_list(state: AppState, args: list[str]) -> Reply:
    tasks = list_tasks(state.task_store)
    if not tasks:
        return Reply("No tasks found.")

    lines = ["Current tasks:"]
    lines.extend(f"{t.id}: {t.description}" for t in tasks)
    return Reply("\n".join(lines))


def cmd_help(state: AppState, args: list[str]) -> Reply:
    return Reply(registry.build_usage(state.prog))


registry.register("add", cmd_add, help_text="Add a new task", usage="add <task description>")
registry.register("remove", cmd_remove, help_text="Remove an existing task", usage="remove <task id>")
registry.register("list", cmd_list, help_text="List all tasks")
registry.register("help", cmd_help, help_text="Show this help", aliases=["-h", "--help"])
