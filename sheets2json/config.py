"""Environment configuration and credential loading."""

from __future__ import annotations

import json
import os
from typing import Any

from dotenv import load_dotenv

from sheets2json.errors import CredentialError

load_dotenv()


def get_credential_path() -> str:
    return os.environ.get("GOOGLE_SHEETS_CREDENTIAL", "")


def get_service_account_json() -> str:
    return os.environ.get("GOOGLE_SERVICE_ACCOUNT_JSON", "")


def get_log_level() -> str:
    return os.environ.get("SHEETS2JSON_LOG_LEVEL", "INFO").upper()


def _require_object(info: Any, source: str) -> dict[str, Any]:
    if not isinstance(info, dict):
        raise CredentialError(
            f"Unable to parse credential JSON{source}: expected a JSON object, got {type(info).__name__}"
        )
    return info


def _read_credential_file(path: str, source: str) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            info = json.load(f)
    except OSError as e:
        raise CredentialError(f"Error reading credential file{source}: {e}") from e
    except json.JSONDecodeError as e:
        raise CredentialError(f"Unable to parse credential JSON{source}: {e}") from e
    return _require_object(info, source)


def load_credential_info(cli_path: str | None = None) -> dict[str, Any]:
    """Load service-account credential info as a dict.

    Priority: 1. the -c command line file, 2. GOOGLE_SHEETS_CREDENTIAL
    (path to a JSON file), 3. GOOGLE_SERVICE_ACCOUNT_JSON (inline JSON).
    """
    if cli_path:
        return _read_credential_file(cli_path, "")

    env_path = get_credential_path()
    if env_path:
        return _read_credential_file(env_path, " from GOOGLE_SHEETS_CREDENTIAL")

    inline = get_service_account_json()
    if inline:
        source = " from GOOGLE_SERVICE_ACCOUNT_JSON"
        try:
            info = json.loads(inline)
        except json.JSONDecodeError as e:
            raise CredentialError(f"Unable to parse credential JSON{source}: {e}") from e
        return _require_object(info, source)

    raise CredentialError(
        "No credentials provided. Use -c or GOOGLE_SHEETS_CREDENTIAL environment variable"
    )
