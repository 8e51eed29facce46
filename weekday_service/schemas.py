from pydantic import BaseModel, Field
from typing import List


class WeekdayCountResponse(BaseModel):
    start_date: str
    end_date: str
    weekday: str = Field(..., description="Three-letter weekday name, e.g. Sun")
    count: int = Field(..., ge=0)


class WeekdayCount(BaseModel):
    weekday: str
    count: int = Field(..., ge=0)


class WeekdayBreakdownResponse(BaseModel):
    start_date: str
    end_date: str
    counts: List[WeekdayCount]
    total_days: int = Field(..., ge=0, description="Days in the range, 0 when it is empty.")


class OrdinalResponse(BaseModel):
    number: int
    ordinal: str


class ObfuscateRequest(BaseModel):
    value: str = Field(..., description="An email address or a phone number.")


class ObfuscateResponse(BaseModel):
    obfuscated: str
