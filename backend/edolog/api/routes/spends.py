from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from edolog.api.deps import db
from edolog.models.spend import Spend
from edolog.schemas.record import RecordCreate, RecordOut, SummaryOut, DeleteOut
from edolog.services import records

router = APIRouter(prefix="/api/spends", tags=["spends"])


@router.post("", response_model=RecordOut, status_code=201)
def create_spend(body: RecordCreate, s: Session = Depends(db)):
    return records.create_record(s, Spend, body)


@router.get("/summary", response_model=SummaryOut)
def spend_summary(month: str | None = Query(None), s: Session = Depends(db)):
    return records.summarize(s, Spend, month)


@router.get("/{spend_id}", response_model=RecordOut)
def get_spend(spend_id: int, s: Session = Depends(db)):
    return records.get_record(s, Spend, spend_id)


@router.delete("/{spend_id}", response_model=DeleteOut)
def delete_spend(spend_id: int, s: Session = Depends(db)):
    records.delete_record(s, Spend, spend_id)
    return DeleteOut()
