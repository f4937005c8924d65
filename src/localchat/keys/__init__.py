"""Secret storage for the endpoint API token."""

from .secret_store import KeyringSecretStore, SecretStore

__all__ = ["KeyringSecretStore", "SecretStore"]
