from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from edolog.api.deps import db
from edolog.models.spend import Spend
from edolog.schemas.record import RecordOut
from edolog.services import records

router = APIRouter(prefix="/api/sectors/{sector}", tags=["sectors"])


@router.get("/spends", response_model=list[RecordOut])
def sector_spends(sector: str, month: str | None = Query(None), s: Session = Depends(db)):
    return records.list_by_sector(s, Spend, sector, month)
