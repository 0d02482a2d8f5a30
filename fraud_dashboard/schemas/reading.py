from datetime import date, datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AddReadingRequest(BaseModel):
    customer_id: int = Field(validation_alias=AliasChoices("customerId", "customer_id"))
    consumption: float
    reading_date: date = Field(validation_alias=AliasChoices("readingDate", "reading_date"))

    model_config = ConfigDict(populate_by_name=True)


class RecentReading(BaseModel):
    consumption_id: int
    customer_id: int
    name: Optional[str] = None
    consumption_kwh: float
    reading_date: date
    meter_reading: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
