"""CLI bootstrap entry point for localchat."""

import argparse
import asyncio
import logging
import sys
import time
from typing import Optional

from . import settings as settings_io
from . import setup_wizard
from .constants import DEFAULT_SETTINGS_PATH, SECRET_KEY_API_TOKEN
from .keys import KeyringSecretStore, SecretStore
from .logging import (
    build_run_log_path,
    log_event,
    sanitize_error_message,
    setup_logging,
)
from .path_utils import map_path
from .repl import repl_loop
from .ui.interaction import ThreadedConsoleInteraction, UserInteractionPort
from .workspace import Workspace

__all__ = ["main", "store_api_token"]

USAGE_LINES = (
    "Usage:",
    "  localchat init [-s <settings-path>]",
    "  localchat setup [-s <settings-path>]",
    "  localchat token",
    "  localchat [-s <settings-path>] [-w <workspace-dir>] [-l <log-path>]",
)


def _map_cli_arg(path: Optional[str], arg_name: str) -> Optional[str]:
    """Map CLI path argument with descriptive error messages."""
    if path is None:
        return None
    try:
        return map_path(path)
    except ValueError as e:
        raise ValueError(f"Invalid {arg_name} path: {e}")


async def store_api_token(
    store: SecretStore,
    interaction: UserInteractionPort,
) -> str:
    """Prompt for the endpoint API token and store it; empty input clears it."""
    token = await interaction.prompt_secret("API token (leave empty to clear): ")
    store.set(SECRET_KEY_API_TOKEN, token.strip())
    if token.strip():
        return "API token stored."
    return "API token cleared."


def _run_init(settings_path: str) -> None:
    try:
        _, messages = settings_io.create_settings(settings_path)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except OSError as e:
        print(f"Error creating settings file: {e}")
        sys.exit(1)

    for message in messages:
        print(message)
    sys.exit(0)


def _run_setup(settings_path: str) -> None:
    """Run the setup wizard; exits unless settings were saved."""
    try:
        result = asyncio.run(
            setup_wizard.run_setup_wizard(
                settings_path, ThreadedConsoleInteraction(), KeyringSecretStore()
            )
        )
    except ValueError as e:
        print(f"Error: {sanitize_error_message(str(e))}")
        sys.exit(1)
    except OSError as e:
        print(f"Error writing settings file: {e}")
        sys.exit(1)

    if result is None:
        sys.exit(1)


def _run_token() -> None:
    try:
        message = asyncio.run(
            store_api_token(KeyringSecretStore(), ThreadedConsoleInteraction())
        )
    except (KeyboardInterrupt, EOFError):
        print("\nCancelled")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {sanitize_error_message(str(e))}")
        sys.exit(1)

    print(message)
    sys.exit(0)


def main() -> None:
    """Main entry point for localchat CLI."""
    parser = argparse.ArgumentParser(
        prog="localchat",
        description="localchat - chat with a locally hosted LLM from your project folder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-s",
        "--settings",
        default=DEFAULT_SETTINGS_PATH,
        help=f"Path to settings file (default: {DEFAULT_SETTINGS_PATH})",
    )

    parser.add_argument(
        "-w",
        "--workspace",
        default=".",
        help="Workspace folder for file commands (default: current directory)",
    )

    parser.add_argument(
        "-l", "--log", help="Path to log file (default: a new file in logs_dir)"
    )

    parser.add_argument(
        "command", nargs="?", help="Command to run ('init', 'setup' or 'token')"
    )

    args = parser.parse_args()
    app_started = time.perf_counter()

    if args.command == "init":
        _run_init(args.settings)

    if args.command == "setup":
        _run_setup(args.settings)
        # Fall through to normal REPL startup with the saved settings
        args.command = None

    if args.command == "token":
        _run_token()

    if args.command:
        print(f"Error: unknown command '{args.command}'")
        print("Supported commands: init, setup, token")
        for line in USAGE_LINES:
            print(line)
        sys.exit(1)

    try:
        mapped_settings_path = _map_cli_arg(args.settings, "settings")
        mapped_workspace = _map_cli_arg(args.workspace, "workspace")
        mapped_log_path = _map_cli_arg(args.log, "log")
        if mapped_settings_path is None or mapped_workspace is None:
            raise ValueError("Invalid settings or workspace path: path is required")

        chat_settings = settings_io.load_settings(mapped_settings_path)
        workspace = Workspace(mapped_workspace)
        if not workspace.root.is_dir():
            raise ValueError(f"Workspace folder not found: {workspace.root}")

        effective_log_path = mapped_log_path or build_run_log_path(chat_settings.logs_dir)
        setup_logging(effective_log_path)

        log_event(
            "app_start",
            level=logging.INFO,
            settings_file=mapped_settings_path,
            workspace=str(workspace.root),
            log_file=effective_log_path,
            provider=chat_settings.api_compat,
            model=chat_settings.model,
            timeout_ms=chat_settings.request_timeout,
        )

        asyncio.run(
            repl_loop(
                chat_settings,
                workspace,
                KeyringSecretStore(),
                settings_path=mapped_settings_path,
                log_file=effective_log_path,
            )
        )
        log_event(
            "app_stop",
            level=logging.INFO,
            reason="normal",
            uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
        )

    except KeyboardInterrupt:
        log_event(
            "app_stop",
            level=logging.INFO,
            reason="keyboard_interrupt",
            uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
        )
        print("\nInterrupted")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {sanitize_error_message(str(e))}")
        log_event(
            "app_stop",
            level=logging.ERROR,
            reason="fatal_error",
            error_type=type(e).__name__,
            error=sanitize_error_message(str(e)),
            uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
        )
        logging.error("Fatal error: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
