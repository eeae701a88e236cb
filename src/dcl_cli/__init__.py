"""dcl-cli — Decentraland LAND information from the command line.

Queries the remote Decentraland API or the Ethereum registries directly
and renders the result with a strict layered architecture.
"""

from dcl_cli.version import __version__

__all__: list[str] = ["__version__"]
