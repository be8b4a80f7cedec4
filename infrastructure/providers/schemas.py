from pydantic import BaseModel, ConfigDict, Field


class ProviderEnvelope(BaseModel):
    """Fields shared by every ExchangeRate-API response body."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    result: str
    error_type: str | None = Field(default=None, alias="error-type")


class PairRatePayload(ProviderEnvelope):
    base_code: str | None = None
    target_code: str | None = None
    conversion_rate: float = Field(gt=0)
    time_last_update_unix: int


class LatestRatesPayload(ProviderEnvelope):
    base_code: str
    conversion_rates: dict[str, float]
    time_last_update_unix: int
