from pydantic import BaseModel, Field


class ExchangeRate(BaseModel):
    """USD/BRL quote as returned by AwesomeAPI (all values are strings)"""

    code: str = Field(..., description="Base currency code")
    codein: str = Field(..., description="Counter currency code")
    name: str = Field(..., description="Pair description")
    high: str
    low: str
    var_bid: str = Field(..., alias="varBid", description="Variation of the bid")
    pct_change: str = Field(..., alias="pctChange", description="Percent change")
    bid: str = Field(..., description="Bid price")
    ask: str = Field(..., description="Ask price")
    timestamp: str
    create_date: str

    class Config:
        populate_by_name = True


class ExchangeRateEnvelope(BaseModel):
    """Top-level AwesomeAPI payload for the USD-BRL pair"""

    usdbrl: ExchangeRate = Field(..., alias="USDBRL")

    class Config:
        populate_by_name = True


class BidResponse(BaseModel):
    """Quote endpoint response: only the bid is exposed"""

    bid: str = Field(..., description="Current USD/BRL bid")
