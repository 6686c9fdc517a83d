"""Common configuration for FMP payload records."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FmpModel(BaseModel):
    """Base record: snake_case attributes parsed from FMP's camelCase keys.

    Unknown keys are ignored so new provider fields never break parsing.
    Irregular FMP keys (``epsdiluted``, ``Stock Price``...) are declared
    with an explicit ``Field(alias=...)``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class SymbolRecord(FmpModel):
    """Any record scoped to a single ticker."""

    symbol: str
