"""Runtime settings for dcl-cli.

Values are read from ``DCL_``-prefixed environment variables (and an
optional ``.env`` in the working directory) via pydantic-settings.  The
``--network`` flag selects which :class:`NetworkConfig` is resolved.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field, HttpUrl, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from dcl_cli.exceptions import ConfigError

DEFAULT_NETWORK: str = "mainnet"
NETWORKS: tuple[str, ...] = ("mainnet", "sepolia")


@dataclass(frozen=True, slots=True)
class NetworkConfig:
    """Endpoints and contract addresses for one Ethereum network."""

    name: str
    api_url: str
    content_url: str
    rpc_url: str
    land_registry: str
    estate_registry: str


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DCL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    network: str = DEFAULT_NETWORK
    debug: bool = False
    http_timeout_seconds: float = Field(default=20.0, gt=0)

    analytics_enabled: bool = True
    analytics_url: HttpUrl | None = None

    # Mainnet
    mainnet_api_url: str = "https://api.decentraland.org/v1"
    mainnet_content_url: str = "https://peer.decentraland.org/content"
    mainnet_rpc_url: str = "https://rpc.decentraland.org/mainnet"
    mainnet_land_registry: str = "0xF87E31492Faf9A91B02Ee0dEAAd50d51d56D5d4d"
    mainnet_estate_registry: str = "0x959e104E1a4dB6317fA58F8295F586e1A978c297"

    # Sepolia
    sepolia_api_url: str = "https://api.decentraland.zone/v1"
    sepolia_content_url: str = "https://peer.decentraland.zone/content"
    sepolia_rpc_url: str = "https://rpc.decentraland.org/sepolia"
    sepolia_land_registry: str = "0x42f4ba48791e2de32f5fbf553441c2672864bb33"
    sepolia_estate_registry: str = "0x369a7fbe718c870c79f99fb423882e8dd8b20486"

    def for_network(self, name: str | None = None) -> NetworkConfig:
        """Resolve the endpoints for *name* (defaults to ``self.network``).

        Raises
        ------
        ConfigError
            If the network is not one of :data:`NETWORKS`.
        """
        network = (name or self.network).strip().lower()
        if network not in NETWORKS:
            raise ConfigError(
                f"Unknown network \"{network}\".",
                hint=f"Choose between {' and '.join(NETWORKS)}.",
            )
        return NetworkConfig(
            name=network,
            api_url=getattr(self, f"{network}_api_url").rstrip("/"),
            content_url=getattr(self, f"{network}_content_url").rstrip("/"),
            rpc_url=getattr(self, f"{network}_rpc_url"),
            land_registry=getattr(self, f"{network}_land_registry"),
            estate_registry=getattr(self, f"{network}_estate_registry"),
        )


def load_settings() -> Settings:
    """Read :class:`Settings` from the environment.

    Raises
    ------
    ConfigError
        If an environment variable holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(
            f"Invalid configuration: {exc.error_count()} error(s)",
            hint=str(exc),
        ) from exc
