from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from edolog.api.deps import db
from edolog.models.income import Income
from edolog.schemas.record import RecordCreate, RecordOut, SummaryOut, DeleteOut
from edolog.services import records

router = APIRouter(prefix="/api/incomes", tags=["incomes"])


@router.post("", response_model=RecordOut, status_code=201)
def create_income(body: RecordCreate, s: Session = Depends(db)):
    return records.create_record(s, Income, body)


@router.get("/summary", response_model=SummaryOut)
def income_summary(month: str | None = Query(None), s: Session = Depends(db)):
    return records.summarize(s, Income, month)


# Registered before "/{income_id}" so the literal segment wins.
@router.get("/by-sector/{sector}", response_model=list[RecordOut])
def sector_incomes(sector: str, month: str | None = Query(None), s: Session = Depends(db)):
    return records.list_by_sector(s, Income, sector, month)


@router.get("/{income_id}", response_model=RecordOut)
def get_income(income_id: int, s: Session = Depends(db)):
    return records.get_record(s, Income, income_id)


@router.delete("/{income_id}", response_model=DeleteOut)
def delete_income(income_id: int, s: Session = Depends(db)):
    records.delete_record(s, Income, income_id)
    return DeleteOut()
