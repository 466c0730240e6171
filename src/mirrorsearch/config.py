"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mirrorsearch.core.exceptions import UnknownNetworkError


class NetworkEntry(BaseModel):
    """A ledger network and the mirror node that serves it."""

    name: str = Field(..., min_length=1, description="Network name (mainnet, testnet, ...)")
    mirror_node_url: str = Field(..., description="Mirror node base URL, without the API prefix")
    ledger_id: str | None = Field(
        default=None,
        pattern=r"^[0-9a-fA-F]{2,}$",
        description="Hex ledger id used for entity id checksums; None disables checksum validation",
    )


def _default_networks() -> list[NetworkEntry]:
    return [
        NetworkEntry(
            name="mainnet",
            mirror_node_url="https://mainnet-public.mirrornode.hedera.com",
            ledger_id="00",
        ),
        NetworkEntry(
            name="testnet",
            mirror_node_url="https://testnet.mirrornode.hedera.com",
            ledger_id="01",
        ),
        NetworkEntry(
            name="previewnet",
            mirror_node_url="https://previewnet.mirrornode.hedera.com",
            ledger_id="02",
        ),
    ]


class MirrorSearchSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="MIRRORSEARCH_",
    )

    # Networks
    networks: list[NetworkEntry] = Field(
        default_factory=_default_networks,
        description="Known networks (JSON list when set from the environment)",
    )
    default_network: str = Field(
        default="mainnet",
        description="Network used when a query does not name one",
    )

    # Mirror node REST API
    api_prefix: str = Field(
        default="/api/v1",
        description="Path prefix of the mirror node REST API",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-request transport timeout in seconds",
    )
    public_key_lookup_limit: int = Field(
        default=2,
        ge=1,
        description="Page size for account lookups by public key",
    )
    user_agent: str = Field(
        default="mirrorsearch/0.1",
        description="User-Agent header sent to the mirror node",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the HTTP API",
    )

    @property
    def network_names(self) -> list[str]:
        return [entry.name for entry in self.networks]

    def get_network(self, name: str | None = None) -> NetworkEntry:
        """
        Look up a configured network by name (case-insensitive).

        Args:
            name: Network name; defaults to ``default_network``

        Raises:
            UnknownNetworkError: If no network with that name is configured
        """
        wanted = (name or self.default_network).lower()
        for entry in self.networks:
            if entry.name.lower() == wanted:
                return entry
        raise UnknownNetworkError(wanted, known=self.network_names)


@lru_cache
def get_settings() -> MirrorSearchSettings:
    """Get cached settings instance."""
    return MirrorSearchSettings()
