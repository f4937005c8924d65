"""Main localchat REPL event loop and host-level commands."""

from __future__ import annotations

import logging
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import DummyHistory

from .. import __version__
from ..commands import parse_command
from ..domain.settings import ChatSettings
from ..formatting import borderline
from ..keys import SecretStore
from ..logging import log_event
from ..session import ChatSession
from ..ui.events import ClearRequest, ConfirmFileWrite, InboundEvent, SubmitText
from ..ui.interaction import ConsoleDisplay, ThreadedConsoleInteraction
from ..workspace import Workspace

HOST_EXIT_COMMANDS = frozenset({"exit", "quit"})


def create_prompt_session() -> PromptSession:
    """Create prompt-toolkit session for REPL input."""
    # DummyHistory: chat input may hold sensitive text; nothing is written to disk.
    return PromptSession(history=DummyHistory())


def print_startup_banner(settings: ChatSettings, workspace: Workspace) -> None:
    """Print REPL startup context and key usage hints."""
    endpoint = settings.custom_endpoint or settings.api_url
    config = settings.endpoint_config()
    print(borderline())
    print(f"localchat {__version__} - Local LLM Chat")
    print(borderline())
    print(f"Endpoint:  {endpoint}")
    print(f"Model:     {config.display()}")
    print(f"Workspace: {workspace.root}")
    print()
    print("Type /help for commands • /clear to reset • /exit or Ctrl-D to quit")
    print(borderline())


def resolve_host_event(text: str, display: ConsoleDisplay) -> Optional[InboundEvent]:
    """Translate one input line into an inbound session event.

    Returns None for ``/exit`` and ``/quit``.

    Raises:
        ValueError: If ``/write`` is missing a valid suggestion number
    """
    command, args = parse_command(text)
    if command in HOST_EXIT_COMMANDS:
        return None
    if command == "clear":
        return ClearRequest()
    if command == "write":
        if len(args) != 1 or not args[0].isdigit():
            raise ValueError("Usage: /write <n>")
        return ConfirmFileWrite(display.take_pending(int(args[0])))
    return SubmitText(text)


async def deliver_event(
    session: ChatSession,
    display: ConsoleDisplay,
    event: InboundEvent,
) -> None:
    """Hand one inbound event to the session.

    A suggestion whose file was written is retired from the pending list.
    """
    if isinstance(event, ConfirmFileWrite):
        outcome = await session.confirm_file_write(event.suggestion)
        if outcome in ("created", "overwritten"):
            display.mark_written(event.suggestion)
        return
    await session.handle_event(event)


async def repl_loop(
    settings: ChatSettings,
    workspace: Workspace,
    secret_store: SecretStore,
    *,
    settings_path: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Run the REPL loop."""
    display = ConsoleDisplay()
    session = ChatSession(
        settings,
        workspace,
        secret_store,
        display,
        ThreadedConsoleInteraction(),
        include_host_commands=True,
    )
    log_event(
        "session_start",
        level=logging.INFO,
        settings_file=settings_path,
        workspace=str(workspace.root),
        log_file=log_file,
        provider=settings.api_compat,
        model=settings.model,
        timeout_ms=settings.request_timeout,
    )

    prompt_session = create_prompt_session()
    print_startup_banner(settings, workspace)

    while True:
        try:
            print()
            user_input = await prompt_session.prompt_async("> ")

            if not user_input.strip():
                continue

            try:
                event = resolve_host_event(user_input, display)
            except ValueError as error:
                print(f"Error: {error}")
                continue

            if event is None:
                log_event(
                    "session_stop",
                    level=logging.INFO,
                    reason="exit_command",
                    message_count=len(session.conversation),
                )
                print("Goodbye!")
                break

            await deliver_event(session, display, event)

        except EOFError:
            log_event(
                "session_stop",
                level=logging.INFO,
                reason="eof",
                message_count=len(session.conversation),
            )
            print("Goodbye!")
            break

        except KeyboardInterrupt:
            # Ctrl+C at the prompt clears the current line; it never exits.
            continue

        except Exception as error:
            log_event(
                "repl_error",
                level=logging.ERROR,
                error_type=type(error).__name__,
                error=str(error),
            )
            logging.error("Unexpected REPL error: %s", error, exc_info=True)
            print(f"Error: {error}")
