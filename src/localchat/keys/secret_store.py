"""Secret store backed by the system credential store via keyring."""

from __future__ import annotations

import sys
from typing import Optional, Protocol

import keyring
from keyring.errors import PasswordDeleteError

from ..constants import SECRET_SERVICE_NAME


class SecretStore(Protocol):
    """Minimal secret get/set contract used by the chat session."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored secret or None."""

    def set(self, key: str, value: str) -> None:
        """Store a secret; an empty value deletes the entry."""


def _credential_store_name() -> str:
    """Return a human-readable name for the platform's credential store."""
    if sys.platform == "darwin":
        return "macOS Keychain"
    elif sys.platform == "win32":
        return "Windows Credential Manager"
    else:
        return "system credential store"


class KeyringSecretStore:
    """``SecretStore`` implementation on top of the keyring library."""

    def __init__(self, service: str = SECRET_SERVICE_NAME) -> None:
        self.service = service

    def get(self, key: str) -> Optional[str]:
        try:
            value = keyring.get_password(self.service, key)
        except Exception as e:
            raise ValueError(
                f"Failed to access {_credential_store_name()}: {e}\n"
                f"Service: {self.service}, Account: {key}"
            )

        if not isinstance(value, str) or not value:
            return None
        return value

    def set(self, key: str, value: str) -> None:
        store_name = _credential_store_name()
        if not value or not value.strip():
            try:
                keyring.delete_password(self.service, key)
            except PasswordDeleteError:
                # Nothing stored under this key.
                return
            except Exception as e:
                raise ValueError(f"Failed to delete key from {store_name}: {e}")
            return

        try:
            keyring.set_password(self.service, key, value)
        except Exception as e:
            raise ValueError(f"Failed to store key in {store_name}: {e}")
