"""
Stable i18n error keys emitted by the validation engine.

Keys are opaque identifiers for an external localization layer; they never
carry human-readable text. Dynamic keys are only ever built from an
enumerated prefix plus a checked identifier.
"""

import re
from dataclasses import dataclass
from enum import Enum

SLOT_ERROR_PREFIX = "settings.slots.errors"
CLIENT_ERROR_PREFIX = "errors.client"

AUTH_TOKEN_KEY = "errors.auth.token"
CLIENT_GENERIC_KEY = f"{CLIENT_ERROR_PREFIX}.generic"
SERVER_RETRY_KEY = "errors.server.tryAgain"

SAFE_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]{0,63}$")


class ErrorKey(str, Enum):
    """Slot validation error keys."""
    FORMAT = f"{SLOT_ERROR_PREFIX}.format"
    ORDER = f"{SLOT_ERROR_PREFIX}.order"
    OVERLAP = f"{SLOT_ERROR_PREFIX}.overlap"
    OVERNIGHT_NOT_SUPPORTED = f"{SLOT_ERROR_PREFIX}.overnightNotSupported"
    MAX = f"{SLOT_ERROR_PREFIX}.max"

    def __str__(self) -> str:
        return self.value


def slot_error_key(name: str) -> ErrorKey:
    """
    Look up a slot error key by its short name ("format", "overlap", ...).

    Raises:
        KeyError: If the name is not part of the slot error vocabulary
    """
    for key in ErrorKey:
        if key.value == f"{SLOT_ERROR_PREFIX}.{name}":
            return key
    raise KeyError(f"Unknown slot error key: {name!r}")


class ErrorKind(str, Enum):
    AUTH = "auth"
    CLIENT = "client"
    SERVER = "server"


@dataclass(frozen=True)
class MappedError:
    """An API failure classified into a kind and an i18n key."""
    kind: ErrorKind
    key: str


def map_api_error(status: int, code: str | None = None) -> MappedError:
    """
    Classify an HTTP failure into an i18n key.

    - 401 -> auth token key
    - other 4xx -> ``errors.client.<code>`` when code is a safe identifier,
      otherwise the generic client key
    - anything else -> server retry key
    """
    if status == 401:
        return MappedError(kind=ErrorKind.AUTH, key=AUTH_TOKEN_KEY)

    if 400 <= status < 500:
        if code and SAFE_IDENTIFIER_PATTERN.fullmatch(code):
            return MappedError(kind=ErrorKind.CLIENT, key=f"{CLIENT_ERROR_PREFIX}.{code}")
        return MappedError(kind=ErrorKind.CLIENT, key=CLIENT_GENERIC_KEY)

    return MappedError(kind=ErrorKind.SERVER, key=SERVER_RETRY_KEY)
