"""Tests for credential loading and environment configuration."""

import json

import pytest

from sheets2json.config import get_log_level, load_credential_info
from sheets2json.errors import CredentialError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("GOOGLE_SHEETS_CREDENTIAL", raising=False)
    monkeypatch.delenv("GOOGLE_SERVICE_ACCOUNT_JSON", raising=False)
    monkeypatch.delenv("SHEETS2JSON_LOG_LEVEL", raising=False)


@pytest.fixture
def credential_file(tmp_path, service_account_info):
    path = tmp_path / "credential.json"
    path.write_text(json.dumps(service_account_info), encoding="utf-8")
    return path


class TestLoadCredentialInfo:
    def test_cli_path(self, credential_file, service_account_info):
        assert load_credential_info(str(credential_file)) == service_account_info

    def test_env_path(self, monkeypatch, credential_file, service_account_info):
        monkeypatch.setenv("GOOGLE_SHEETS_CREDENTIAL", str(credential_file))
        assert load_credential_info() == service_account_info

    def test_inline_json(self, monkeypatch, service_account_info):
        monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", json.dumps(service_account_info))
        assert load_credential_info() == service_account_info

    def test_cli_path_wins_over_env(self, monkeypatch, tmp_path, credential_file, service_account_info):
        other = tmp_path / "other.json"
        other.write_text(json.dumps({"client_email": "other@example.com"}), encoding="utf-8")
        monkeypatch.setenv("GOOGLE_SHEETS_CREDENTIAL", str(other))
        assert load_credential_info(str(credential_file)) == service_account_info

    def test_env_path_wins_over_inline(self, monkeypatch, credential_file, service_account_info):
        monkeypatch.setenv("GOOGLE_SHEETS_CREDENTIAL", str(credential_file))
        monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", json.dumps({"client_email": "inline@example.com"}))
        assert load_credential_info() == service_account_info

    def test_no_credentials(self):
        with pytest.raises(CredentialError, match="No credentials provided"):
            load_credential_info()

    def test_missing_file(self, tmp_path):
        with pytest.raises(CredentialError, match="Error reading credential file"):
            load_credential_info(str(tmp_path / "missing.json"))

    def test_missing_env_file_names_variable(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GOOGLE_SHEETS_CREDENTIAL", str(tmp_path / "missing.json"))
        with pytest.raises(CredentialError, match="GOOGLE_SHEETS_CREDENTIAL"):
            load_credential_info()

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CredentialError, match="Unable to parse credential JSON"):
            load_credential_info(str(path))

    def test_invalid_inline_json(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", "{not json")
        with pytest.raises(CredentialError, match="GOOGLE_SERVICE_ACCOUNT_JSON"):
            load_credential_info()

    def test_list_file_rejected(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps(["not", "an", "object"]), encoding="utf-8")
        with pytest.raises(CredentialError, match="expected a JSON object"):
            load_credential_info(str(path))

    def test_string_file_rejected(self, tmp_path):
        path = tmp_path / "string.json"
        path.write_text('"service-account"', encoding="utf-8")
        with pytest.raises(CredentialError, match="expected a JSON object"):
            load_credential_info(str(path))

    def test_list_inline_rejected(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", "[1, 2]")
        with pytest.raises(CredentialError, match="GOOGLE_SERVICE_ACCOUNT_JSON: expected a JSON object"):
            load_credential_info()


class TestLogLevel:
    def test_default(self):
        assert get_log_level() == "INFO"

    def test_override_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("SHEETS2JSON_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"
