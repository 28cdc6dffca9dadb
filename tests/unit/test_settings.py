"""
Tests for application settings validation.
"""

import pytest
from pydantic import ValidationError

from roistake.config.business_constants import (
    COOLDOWN_SECONDS,
    REFERRAL_BPS,
    ROI_BPS,
    ZERO_ADDRESS,
)
from roistake.config.settings import Settings


class TestSettings:
    """Test Settings defaults and validators."""

    def test_defaults_match_business_constants(self):
        config = Settings(_env_file=None)

        assert config.roi_bps == ROI_BPS
        assert config.referral_bps == REFERRAL_BPS
        assert config.cooldown_seconds == COOLDOWN_SECONDS

    def test_pool_address_is_checksummed(self):
        config = Settings(
            _env_file=None,
            pool_address="0x90f79bf6eb2c4f870365e785982e1f101e93b906",
        )

        assert config.pool_address == "0x90F79bf6EB2c4f870365E785982E1f101E93b906"

    def test_pool_address_rejects_zero_address(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, pool_address=ZERO_ADDRESS)

    def test_pool_address_rejects_garbage(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, pool_address="pool")

    def test_database_url_requires_async_driver(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, database_url="postgresql://u:p@localhost/db")

    def test_bps_out_of_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, referral_bps=20_000)

    def test_production_rejects_echo(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="production", database_echo=True)
