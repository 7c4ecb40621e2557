# src/gilu/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from ..cli.commands import registry as command_registry
from ..core import persona
from ..core.state import AppState

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


def _emit_stdout(text: str) -> None:
    print(text, end="" if text.endswith("\n") else "\n", flush=True)


def _stdin_lines(prompt: str = "") -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            return
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            return


def run_session(state: AppState, lines: Iterable[str], emit: Emitter) -> None:
    """
    Drive one conversation: greet, then answer each line until `bye` or input ends.

    Each line is handled to completion (including the file rewrite) before the
    next one is read.
    """
    app_name = str(getattr(state.settings, "app_name", "Gilu"))
    emit(state.ui.show_message(persona.get_greeting(app_name)))
    if state.startup_notice:
        emit(state.ui.show_message(state.startup_notice))

    for raw in lines:
        user_input = raw.strip()
        try:
            result = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            emit(state.ui.show_message(persona.INTERNAL_ERROR))
            continue

        emit(result.text)
        if result.should_exit:
            logger.info("Exit command received.")
            break


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    run_session(state, _stdin_lines(), _emit_stdout)
    logger.info("Console connector finished.")
