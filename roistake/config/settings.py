"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from eth_utils import is_address, to_checksum_address
from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from roistake.config.business_constants import (
    BPS_DENOMINATOR,
    COOLDOWN_SECONDS,
    DEFAULT_POOL_ADDRESS,
    REFERRAL_BPS,
    ROI_BPS,
    ZERO_ADDRESS,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./staking_ledger.db"
    database_echo: bool = False

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    log_file: str = "logs/staking_ledger.log"

    # Pool custody account on the asset ledger
    pool_address: str = Field(
        default=DEFAULT_POOL_ADDRESS,
        description="Account holding staked principal and paying yield"
    )

    # Token display settings
    token_symbol: str = "TT"
    token_decimals: int = Field(
        default=18, ge=0, le=36, description="Token decimals for display"
    )

    # Staking terms
    roi_bps: int = Field(
        default=ROI_BPS,
        ge=0,
        le=BPS_DENOMINATOR,
        description="Daily yield on principal in basis points"
    )
    referral_bps: int = Field(
        default=REFERRAL_BPS,
        ge=0,
        le=BPS_DENOMINATOR,
        description="Referral bonus on each stake in basis points"
    )
    cooldown_seconds: int = Field(
        default=COOLDOWN_SECONDS,
        gt=0,
        description="Minimum seconds between two yield claims"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('pool_address')
    @classmethod
    def validate_pool_address(cls, v: str) -> str:
        """Validate pool address and normalize it to checksum form."""
        if not is_address(v):
            raise ValueError(
                f'Invalid pool address: {v}. '
                'Must be a 0x-prefixed 20-byte hex address.'
            )
        if v.lower() == ZERO_ADDRESS:
            raise ValueError('Pool address cannot be the zero address')
        return to_checksum_address(v)

    @field_validator('database_url')
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate database URL uses an async driver."""
        if not v.startswith(('postgresql+asyncpg://', 'sqlite+aiosqlite://')):
            raise ValueError(
                'DATABASE_URL must start with postgresql+asyncpg:// '
                'or sqlite+aiosqlite://'
            )
        return v

    @model_validator(mode='after')
    def validate_production(self) -> 'Settings':
        """Validate production-specific requirements."""
        if self.environment == 'production':
            if self.database_url.startswith('sqlite'):
                logger.warning(
                    'DATABASE_URL points to SQLite in production. '
                    'Row locking is unavailable; run a single engine instance.'
                )
            if self.database_echo:
                raise ValueError(
                    'DATABASE_ECHO must be False in production environment.'
                )
        return self


# Global settings instance
settings = Settings()
