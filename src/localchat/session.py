"""Chat session: routes host events through commands, history and the endpoint."""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable, Optional, Sequence

from .ai import invoke
from .commands import CommandHandler, is_command, parse_command
from .constants import SECRET_KEY_API_TOKEN
from .domain.chat import ChatMessage, Conversation, FileSuggestion
from .domain.config import EndpointConfig
from .domain.settings import ChatSettings
from .errors import LocalChatError
from .file_writer import WriteOutcome, create_file, describe_outcome
from .history import trim_history
from .keys import SecretStore
from .logging import log_event, sanitize_error_message, summarize_command_args
from .suggestions import extract_file_suggestions
from .ui.events import (
    AppendMessage,
    ClearDisplay,
    ClearRequest,
    ConfirmFileWrite,
    InboundEvent,
    ProposeFile,
    ReportError,
    SubmitText,
)
from .ui.interaction import DisplayPort, UserInteractionPort
from .workspace import Workspace

EndpointInvoker = Callable[[EndpointConfig, Sequence[ChatMessage]], Awaitable[str]]


class ChatSession:
    """One conversation bound to one workspace and one display.

    Only one model call is in flight at a time: the host awaits each
    event before delivering the next.
    """

    def __init__(
        self,
        settings: ChatSettings,
        workspace: Workspace,
        secret_store: SecretStore,
        display: DisplayPort,
        interaction: UserInteractionPort,
        *,
        invoker: Optional[EndpointInvoker] = None,
        include_host_commands: bool = False,
    ) -> None:
        self.settings = settings
        self.workspace = workspace
        self.secret_store = secret_store
        self.display = display
        self.interaction = interaction
        self.invoker: EndpointInvoker = invoker or invoke
        self.conversation = Conversation.start(settings.system_prompt)
        self.commands = CommandHandler(
            workspace,
            self.conversation,
            display,
            include_host_commands=include_host_commands,
        )

    async def handle_event(self, event: InboundEvent) -> None:
        """Consume one inbound host event."""
        if isinstance(event, SubmitText):
            await self.submit_text(event.text)
        elif isinstance(event, ClearRequest):
            await self.clear()
        elif isinstance(event, ConfirmFileWrite):
            await self.confirm_file_write(event.suggestion)
        else:
            raise TypeError(f"Unsupported event: {type(event).__name__}")

    async def submit_text(self, text: str) -> None:
        """Handle one line of user input: a slash command or a chat turn."""
        text = text.strip()
        if not text:
            return

        if is_command(text):
            await self._run_command(text)
            return

        await self._send_chat_turn(text)

    async def _run_command(self, text: str) -> None:
        command, args = parse_command(text)
        started = time.perf_counter()
        try:
            await self.commands.execute_command(text)
        except (LocalChatError, ValueError) as error:
            log_event(
                "command_error",
                level=logging.ERROR,
                command=command,
                args_summary=summarize_command_args(command, args),
                error_type=type(error).__name__,
                error=sanitize_error_message(str(error)),
            )
            await self.display.post(ReportError(str(error)))
            return

        log_event(
            "command_exec",
            level=logging.INFO,
            command=command,
            args_summary=summarize_command_args(command, args),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )

    async def _send_chat_turn(self, text: str) -> None:
        self.conversation.append(ChatMessage.user(text))
        await self.display.post(AppendMessage(role="user", content=text))
        self._trim()

        try:
            config = self.settings.endpoint_config(self._api_token())
            reply = await self.invoker(config, self.conversation.snapshot())
        except (LocalChatError, ValueError) as error:
            # The user turn stays recorded; nothing else changes.
            await self.display.post(ReportError(sanitize_error_message(str(error))))
            return

        self.conversation.append(ChatMessage.assistant(reply))
        await self.display.post(AppendMessage(role="assistant", content=reply))

        for suggestion in extract_file_suggestions(reply):
            await self.display.post(ProposeFile(suggestion))

    def _api_token(self) -> Optional[str]:
        return self.secret_store.get(SECRET_KEY_API_TOKEN)

    def _trim(self) -> None:
        max_messages = self.settings.max_history_messages
        before = len(self.conversation)
        trimmed = trim_history(self.conversation.messages, max_messages)
        if len(trimmed) != before:
            self.conversation.replace_with(trimmed)
            log_event(
                "history_trimmed",
                level=logging.INFO,
                before=before,
                after=len(trimmed),
                max_messages=max_messages,
            )

    async def clear(self) -> None:
        """Reset the conversation to a fresh system message."""
        message_count = len(self.conversation)
        self.conversation.reset(self.settings.system_prompt)
        log_event("conversation_reset", level=logging.INFO, message_count=message_count)
        await self.display.post(ClearDisplay())

    async def confirm_file_write(self, suggestion: FileSuggestion) -> Optional[WriteOutcome]:
        """Run the confirmation gate for one suggestion.

        Validation and write failures are reported on the display; the
        outcome is None in that case.
        """
        try:
            outcome = await create_file(
                suggestion.path,
                suggestion.content,
                workspace=self.workspace,
                settings=self.settings,
                interaction=self.interaction,
                display=self.display,
            )
        except (LocalChatError, ValueError) as error:
            await self.display.post(ReportError(str(error)))
            return None

        await self.display.post(
            AppendMessage(role="system", content=describe_outcome(suggestion.path, outcome))
        )
        return outcome
