"""Pydantic models for yield calculator."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StakingTerms(BaseModel):
    """Model for staking pool terms.

    Rates are expressed in basis points of the principal or stake amount.
    """

    model_config = ConfigDict(frozen=True)

    roi_bps: int = Field(..., ge=0, le=10_000, description="Daily yield in bps")
    referral_bps: int = Field(
        ..., ge=0, le=10_000, description="Referral bonus per stake in bps"
    )
    cooldown_seconds: int = Field(
        ..., gt=0, description="Minimum seconds between two yield claims"
    )
    bps_denominator: int = Field(default=10_000, gt=0)


class YieldPayout(BaseModel):
    """Split of an owed yield into what the pool pays and what is forfeited."""

    model_config = ConfigDict(frozen=True)

    owed: int = Field(..., ge=0, description="Yield due for the claim")
    paid: int = Field(..., ge=0, description="Amount actually transferred")
    shortfall: int = Field(..., ge=0, description="Unpaid part, forfeited")

    @model_validator(mode="after")
    def check_split(self) -> "YieldPayout":
        if self.paid + self.shortfall != self.owed:
            raise ValueError("paid + shortfall must equal owed")
        return self

    @property
    def degraded(self) -> bool:
        """Pool could not pay the full amount owed."""
        return self.shortfall > 0


class YieldProjection(BaseModel):
    """Yield collected by claiming on time over a number of days.

    Principal is not compounded: each claim pays one day's yield on the
    principal at that moment.
    """

    model_config = ConfigDict(frozen=True)

    principal: int = Field(..., ge=0)
    days: int = Field(..., ge=0)
    daily_yield: int = Field(..., ge=0)
    claims: int = Field(..., ge=0, description="Number of on-time claims")
    total_yield: int = Field(..., ge=0)
