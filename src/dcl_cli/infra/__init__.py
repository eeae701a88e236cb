"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Decentraland API, the
catalyst content servers and the Ethereum registries.  Every raw
third-party exception must be caught here and re-raised as a
:class:`~dcl_cli.exceptions.DclError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from dcl_cli.infra.analytics import AnalyticsClient
from dcl_cli.infra.api_provider import ApiLandProvider
from dcl_cli.infra.content_client import ContentSceneProvider
from dcl_cli.infra.factory import Services, open_services

__all__: list[str] = [
    "AnalyticsClient",
    "ApiLandProvider",
    "ContentSceneProvider",
    "Services",
    "open_services",
]
