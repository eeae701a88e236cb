"""Custom exception hierarchy for dcl-cli.

All exceptions that cross layer boundaries must inherit from
:class:`DclError`.  Raw third-party exceptions (httpx, web3) must NEVER
propagate beyond the infrastructure layer — they are caught there and
re-raised as a typed subclass defined here.

Hierarchy
---------
DclError
├── InfoError
├── InvalidCoordinatesError
├── LandDataError
├── LandQueryError
│   ├── ApiError
│   └── BlockchainError
├── ConfigError
└── EnvironmentError
"""

from __future__ import annotations


class DclError(Exception):
    """Base exception for all dcl-cli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command input ----------------------------------------------------------

class InfoError(DclError):
    """Raised when the ``info`` command receives a missing or bad target."""


class InvalidCoordinatesError(DclError):
    """Raised when a string cannot be read as an ``x,y`` parcel pair."""


# --- Metadata decoding ------------------------------------------------------

class LandDataError(DclError):
    """Raised when an on-chain metadata string cannot be decoded."""


# --- Remote queries ---------------------------------------------------------

class LandQueryError(DclError):
    """Raised when LAND information cannot be retrieved."""


class ApiError(LandQueryError):
    """Raised when the remote Decentraland API returns an error."""


class BlockchainError(LandQueryError):
    """Raised when the JSON-RPC provider or a contract call fails."""


# --- Environment / configuration -------------------------------------------

class ConfigError(DclError):
    """Raised when settings are invalid (e.g. an unknown network)."""


class EnvironmentError(DclError):
    """Raised when a required runtime dependency is not available."""


def append_blockchain_suggestion(hint: str) -> str:
    """Append the ``--blockchain`` fallback suggestion to a hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "The remote API may be down. Query the registries directly:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    dcl info <target> --blockchain",
        )
    )
