"""Create, list, fetch, delete and summarize money records.

Every function takes the mapped model (``Spend`` or ``Income``) so both
resources share one implementation.
"""

import logging
from datetime import datetime

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from edolog.core.errors import NotFound, ValidationError
from edolog.models.record import RecordMixin
from edolog.schemas.record import RecordCreate, SectorTotal, SummaryOut
from edolog.utils.months import month_range
from edolog.utils.timezone import now_local

log = logging.getLogger(__name__)

REQUIRED_FIELDS_ERROR = "name, sector, amount required"


def _require_fields(body: RecordCreate) -> None:
    # Empty name/sector count as missing; amount only has to be present.
    if not body.name or not body.sector or body.amount is None:
        raise ValidationError(REQUIRED_FIELDS_ERROR)


def create_record(s: Session, model: type[RecordMixin], body: RecordCreate):
    _require_fields(body)
    row = model(
        name=body.name,
        sector=body.sector,
        amount=body.amount,
        note=body.note or "",
        date=body.date or now_local(),
    )
    s.add(row)
    s.commit()
    s.refresh(row)
    log.info("created %s id=%s sector=%s amount=%s", model.__tablename__, row.id, row.sector, row.amount)
    return row


def get_record(s: Session, model: type[RecordMixin], record_id: int):
    row = s.execute(select(model).where(model.id == record_id)).scalar_one_or_none()
    if row is None:
        raise NotFound()
    return row


def delete_record(s: Session, model: type[RecordMixin], record_id: int) -> None:
    row = get_record(s, model, record_id)
    s.delete(row)
    s.commit()
    log.info("deleted %s id=%s", model.__tablename__, record_id)


def records_in_range(s: Session, model: type[RecordMixin], start: datetime, end: datetime, sector: str | None = None):
    q = select(model).where(model.date >= start, model.date < end)
    if sector is not None:
        q = q.where(model.sector == sector)
    q = q.order_by(model.date.desc(), model.id.desc())
    return s.execute(q).scalars().all()


def list_by_sector(s: Session, model: type[RecordMixin], sector: str, month: str | None = None):
    start, end = month_range(month)
    return records_in_range(s, model, start, end, sector=sector)


def sector_totals(s: Session, model: type[RecordMixin], start: datetime, end: datetime) -> list[SectorTotal]:
    rows = s.execute(
        select(model.sector, func.sum(model.amount))
        .where(model.date >= start, model.date < end)
        .group_by(model.sector)
        .order_by(model.sector.asc())
    ).all()
    return [SectorTotal(sector=sector, amount=float(amount or 0)) for (sector, amount) in rows]


def summarize(s: Session, model: type[RecordMixin], month: str | None = None) -> SummaryOut:
    start, end = month_range(month)
    by_sector = sector_totals(s, model, start, end)
    total = sum((g.amount for g in by_sector), 0.0)
    return SummaryOut(total=total, by_sector=by_sector)
