from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from edolog.utils.timezone import to_local_naive


class RecordCreate(BaseModel):
    # Presence of name/sector/amount is checked by the service so a missing
    # field reports the same message whichever one is absent.
    name: str | None = None
    sector: str | None = None
    amount: float | None = None
    note: str | None = None
    date: datetime | None = None

    @field_validator("amount")
    @classmethod
    def amount_must_be_finite(cls, v: float | None):
        if v is None:
            return None
        if v != v:
            raise ValueError("amount must be a number")
        if v == float("inf") or v == float("-inf"):
            raise ValueError("amount must be finite")
        return v

    @field_validator("date")
    @classmethod
    def date_to_local(cls, v: datetime | None):
        if v is None:
            return None
        return to_local_naive(v)


class RecordOut(BaseModel):
    id: int
    name: str
    sector: str
    amount: float
    note: str
    date: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SectorTotal(BaseModel):
    sector: str
    amount: float


class SummaryOut(BaseModel):
    total: float = 0
    by_sector: list[SectorTotal] = Field(default_factory=list, alias="bySector")

    class Config:
        populate_by_name = True


class DeleteOut(BaseModel):
    ok: bool = True
