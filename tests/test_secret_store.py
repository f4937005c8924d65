"""Tests for the keyring-backed secret store."""

from unittest.mock import patch

import pytest
from keyring.errors import PasswordDeleteError

from localchat.constants import SECRET_KEY_API_TOKEN
from localchat.keys import KeyringSecretStore


def test_get_returns_stored_token():
    with patch("localchat.keys.secret_store.keyring") as mock_keyring:
        mock_keyring.get_password.return_value = "tok-123"

        assert KeyringSecretStore().get(SECRET_KEY_API_TOKEN) == "tok-123"
        mock_keyring.get_password.assert_called_once_with("localchat", "localchat.apiToken")


@pytest.mark.parametrize("stored", [None, ""])
def test_get_returns_none_when_unset(stored):
    with patch("localchat.keys.secret_store.keyring") as mock_keyring:
        mock_keyring.get_password.return_value = stored

        assert KeyringSecretStore().get(SECRET_KEY_API_TOKEN) is None


def test_get_access_failure():
    with patch("localchat.keys.secret_store.keyring") as mock_keyring:
        mock_keyring.get_password.side_effect = Exception("Access denied")

        with pytest.raises(ValueError, match="Failed to access"):
            KeyringSecretStore().get(SECRET_KEY_API_TOKEN)


def test_set_stores_value():
    with patch("localchat.keys.secret_store.keyring") as mock_keyring:
        KeyringSecretStore().set(SECRET_KEY_API_TOKEN, "tok-new")

        mock_keyring.set_password.assert_called_once_with(
            "localchat", "localchat.apiToken", "tok-new"
        )


def test_set_empty_value_deletes():
    with patch("localchat.keys.secret_store.keyring") as mock_keyring:
        KeyringSecretStore().set(SECRET_KEY_API_TOKEN, "")

        mock_keyring.delete_password.assert_called_once_with("localchat", "localchat.apiToken")
        mock_keyring.set_password.assert_not_called()


def test_set_empty_value_when_nothing_stored():
    with patch("localchat.keys.secret_store.keyring") as mock_keyring:
        mock_keyring.delete_password.side_effect = PasswordDeleteError("not found")

        KeyringSecretStore().set(SECRET_KEY_API_TOKEN, "  ")


def test_set_store_failure():
    with patch("localchat.keys.secret_store.keyring") as mock_keyring:
        mock_keyring.set_password.side_effect = Exception("locked")

        with pytest.raises(ValueError, match="Failed to store key"):
            KeyringSecretStore().set(SECRET_KEY_API_TOKEN, "tok")
