# src/gilu/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core import persona
from ..core.command_parser import Command, classify
from ..core.errors import GiluError
from ..core.state import AppState

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    text: str
    should_exit: bool = False


class CommandRegistry:
    """Routes a classified input line to its handler (list, todo, mark, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}
        self._help: dict[Command, str] = {}

    def register(
        self,
        command: Command,
        handler: CommandHandler,
        usage: str,
        help_text: str,
    ) -> None:
        self._handlers[command] = handler
        self._help[command] = f"{usage} - {help_text}"

    def handle(self, state: AppState, line: str) -> CommandResult:
        """
        Handle one raw input line.

        User-input errors become a normal reply; the session always continues
        unless the line was an exit command.
        """
        command = classify(line)
        handler = self._handlers.get(command)
        if handler is None:
            logger.debug("Unrecognised input %r", line)
            return CommandResult(state.ui.show_message(self.build_help()))

        try:
            text = handler(state, line)
        except GiluError as e:
            logger.info("Rejected %s input: %s", command.name, e.message)
            return CommandResult(state.ui.show_message(e.message))

        return CommandResult(text, should_exit=command is Command.EXIT)

    def build_help(self) -> str:
        lines = [persona.HELP_HEADER]
        for help_line in self._help.values():
            lines.append(f"  {help_line}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_list(state: AppState, line: str) -> str:
    return state.tasks.list_tasks()


def cmd_sort(state: AppState, line: str) -> str:
    return state.tasks.sort_tasks()


def cmd_list_date(state: AppState, line: str) -> str:
    return state.tasks.list_on_date(line)


def cmd_todo(state: AppState, line: str) -> str:
    return state.tasks.add_todo(line)


def cmd_deadline(state: AppState, line: str) -> str:
    return state.tasks.add_deadline(line)


def cmd_event(state: AppState, line: str) -> str:
    return state.tasks.add_event(line)


def cmd_mark(state: AppState, line: str) -> str:
    return state.tasks.mark(line)


def cmd_unmark(state: AppState, line: str) -> str:
    return state.tasks.unmark(line)


def cmd_delete(state: AppState, line: str) -> str:
    return state.tasks.delete(line)


def cmd_find(state: AppState, line: str) -> str:
    return state.tasks.find(line)


def cmd_exit(state: AppState, line: str) -> str:
    return state.ui.show_message(persona.FAREWELL)


registry.register(Command.LIST, cmd_list, "list", "Show every task.")
registry.register(Command.LIST_DATE, cmd_list_date, "list yyyy-MM-dd", "Show deadlines and events on a day.")
registry.register(Command.SORT, cmd_sort, "sort", "Show events, deadlines and todos in date order.")
registry.register(Command.TODO, cmd_todo, "todo <task>", "Add a todo.")
registry.register(
    Command.DEADLINE, cmd_deadline, "deadline <task> /by yyyy-MM-dd HHmm", "Add a deadline."
)
registry.register(
    Command.EVENT,
    cmd_event,
    "event <task> /from yyyy-MM-dd HHmm /to yyyy-MM-dd HHmm",
    "Add an event.",
)
registry.register(Command.MARK, cmd_mark, "mark <n>", "Mark task n as done.")
registry.register(Command.UNMARK, cmd_unmark, "unmark <n>", "Mark task n as not done.")
registry.register(Command.DELETE, cmd_delete, "delete <n>", "Remove task n.")
registry.register(Command.FIND, cmd_find, "find <keyword>", "Search task descriptions.")
registry.register(Command.EXIT, cmd_exit, "bye", "End the session.")
