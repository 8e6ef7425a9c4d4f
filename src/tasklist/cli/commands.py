# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from ..core.errors import TaskError
from ..core.state import AppState
from ..tasks.task_codec import owner_prefix
from ..tasks.task_models import TASK_ID_MAX, Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Bad command arguments; the message is shown to the user as-is."""


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}"
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except UsageError as e:
            return str(e)
        except TaskError as e:
            logger.debug("Command /%s failed: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def _task_id(raw: str, usage: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise UsageError(f"Task id must be a number, got {raw!r}.\nUsage: {usage}") from None
    if not 0 <= value <= TASK_ID_MAX:
        raise UsageError(f"Task id out of range: {value}.\nUsage: {usage}")
    return value


def _need(args: list[str], n: int, usage: str) -> None:
    if len(args) < n:
        raise UsageError(f"Usage: {usage}")


def _opt_int(args: list[str], i: int, what: str) -> int | None:
    if len(args) <= i:
        return None
    try:
        return int(args[i])
    except ValueError:
        raise UsageError(f"{what} must be a number, got {args[i]!r}.") from None


def format_task(task: Task) -> str:
    mark = "x" if task.is_completed else " "
    tags = f" [tags: {', '.join(task.tags)}]" if task.tags else ""
    return f"#{task.id} [{mark}] ({task.priority.value}) {task.description}{tags}"


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_whoami(state: AppState, args: list[str]) -> str:
    """
    /whoami         -> show current owner
    /whoami <name>  -> act as another owner for the rest of the session
    """
    if args:
        if not args[0].strip():
            raise UsageError("Usage: /whoami [name]")
        try:
            owner_prefix(args[0])
        except ValueError:
            raise UsageError("Owner name is too long or not valid UTF-8.\nUsage: /whoami [name]") from None
        state.identity.switch(args[0])
        logger.info("Console owner switched to %s", args[0])
        return f"Now acting as {state.owner}."
    return f"You are {state.owner}."


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    return (
        "Status:\n"
        f"  Owner: {state.owner}\n"
        f"  Storage: {getattr(settings, 'storage', 'sqlite')}\n"
        f"  Your tasks: {state.service.count_tasks()}\n"
        f"  Last issued id: {state.service.last_issued_id()}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    usage = "/add [-p low|medium|high] <text>"
    priority: str | None = None
    if args and args[0] in ("-p", "--priority"):
        _need(args, 2, usage)
        priority = args[1]
        args = args[2:]
    _need(args, 1, usage)
    task_id = state.service.create_task(" ".join(args), priority)
    return f"Added task #{task_id}."


def cmd_get(state: AppState, args: list[str]) -> str:
    usage = "/get <id>"
    _need(args, 1, usage)
    return format_task(state.service.get_task(_task_id(args[0], usage)))


def cmd_list(state: AppState, args: list[str]) -> str:
    page = _opt_int(args, 0, "Page")
    limit = _opt_int(args, 1, "Limit")
    tasks = state.service.list_tasks(page, limit)
    if not tasks:
        return "No tasks on this page."
    return "\n".join(format_task(t) for t in tasks)


def cmd_update(state: AppState, args: list[str]) -> str:
    usage = "/update <id> <text>"
    _need(args, 1, usage)
    task_id = _task_id(args[0], usage)
    state.service.update_task(task_id, " ".join(args[1:]))
    return f"Updated task #{task_id}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    usage = "/delete <id>"
    _need(args, 1, usage)
    task_id = _task_id(args[0], usage)
    state.service.delete_task(task_id)
    return f"Deleted task #{task_id}."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    usage = "/toggle <id>"
    _need(args, 1, usage)
    task_id = _task_id(args[0], usage)
    state.service.toggle_task_complete(task_id)
    return format_task(state.service.get_task(task_id))


def cmd_done(state: AppState, args: list[str]) -> str:
    usage = "/done <id>"
    _need(args, 1, usage)
    task_id = _task_id(args[0], usage)
    state.service.mark_task_complete(task_id)
    return f"Task #{task_id} marked complete."


def cmd_undone(state: AppState, args: list[str]) -> str:
    usage = "/undone <id>"
    _need(args, 1, usage)
    task_id = _task_id(args[0], usage)
    state.service.mark_task_incomplete(task_id)
    return f"Task #{task_id} marked incomplete."


def cmd_priority(state: AppState, args: list[str]) -> str:
    usage = "/priority <id> low|medium|high"
    _need(args, 2, usage)
    task_id = _task_id(args[0], usage)
    prio = state.service.set_task_priority(task_id, args[1])
    return f"Task #{task_id} priority set to {prio.value}."


def cmd_tag(state: AppState, args: list[str]) -> str:
    usage = "/tag <id> <tag>"
    _need(args, 2, usage)
    task_id = _task_id(args[0], usage)
    state.service.add_tag(task_id, args[1])
    return f"Tagged task #{task_id} with {args[1]!r}."


def cmd_untag(state: AppState, args: list[str]) -> str:
    usage = "/untag <id> <tag>"
    _need(args, 2, usage)
    task_id = _task_id(args[0], usage)
    state.service.remove_tag(task_id, args[1])
    return f"Removed tag {args[1]!r} from task #{task_id}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("whoami", cmd_whoami, help_text="Show or switch the current owner: /whoami [name].")
registry.register("status", cmd_status, help_text="Show owner, storage and task counts.")
registry.register("add", cmd_add, help_text="Create a task: /add [-p low|medium|high] <text>.")
registry.register("get", cmd_get, help_text="Show one task: /get <id>.")
registry.register("list", cmd_list, help_text="List tasks: /list [page] [limit].", aliases=["ls"])
registry.register("update", cmd_update, help_text="Change task text: /update <id> <text>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("toggle", cmd_toggle, help_text="Flip completion: /toggle <id>.")
registry.register("done", cmd_done, help_text="Mark complete: /done <id>.")
registry.register("undone", cmd_undone, help_text="Mark incomplete: /undone <id>.")
registry.register("priority", cmd_priority, help_text="Set priority: /priority <id> low|medium|high.")
registry.register("tag", cmd_tag, help_text="Add a tag: /tag <id> <tag>.")
registry.register("untag", cmd_untag, help_text="Remove every copy of a tag: /untag <id> <tag>.")
