from datetime import datetime, timedelta
from random import Random

import pytest
from sqlalchemy import create_engine, select, func
from sqlalchemy.orm import sessionmaker

from edolog.core.errors import NotFound, ValidationError
from edolog.db.base import Base
from edolog.models.income import Income
from edolog.models.spend import Spend
from edolog.schemas.record import RecordCreate
from edolog.services import records


@pytest.fixture(scope="session")
def engine():
    eng = create_engine("sqlite+pysqlite:///:memory:", future=True)
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture()
def session(engine):
    connection = engine.connect()
    trans = connection.begin()
    Session = sessionmaker(bind=connection, autoflush=False, autocommit=False, future=True)
    s = Session()
    try:
        yield s
    finally:
        s.close()
        trans.rollback()
        connection.close()


def _add(session, model, name: str, sector: str, amount: float, d: datetime):
    return records.create_record(session, model, RecordCreate(name=name, sector=sector, amount=amount, date=d))


def _count(session, model) -> int:
    return session.execute(select(func.count()).select_from(model)).scalar_one()


def test_create_fills_defaults(session):
    before = datetime.now()
    row = records.create_record(session, Spend, RecordCreate(name="Coffee", sector="Food", amount=4.5))
    assert row.id is not None
    assert row.note == ""
    assert before - timedelta(seconds=1) <= row.date <= datetime.now() + timedelta(seconds=1)
    assert row.created_at is not None and row.updated_at is not None


@pytest.mark.parametrize(
    "body",
    [
        {"sector": "Food", "amount": 1.0},
        {"name": "Coffee", "amount": 1.0},
        {"name": "Coffee", "sector": "Food"},
        {"name": "", "sector": "Food", "amount": 1.0},
        {"name": "Coffee", "sector": "", "amount": 1.0},
        {"name": "Coffee", "sector": "Food", "amount": None},
    ],
)
def test_create_requires_name_sector_amount(session, body):
    with pytest.raises(ValidationError) as exc:
        records.create_record(session, Spend, RecordCreate(**body))
    assert exc.value.message == "name, sector, amount required"
    assert _count(session, Spend) == 0


@pytest.mark.parametrize("amount", [0, -12.75])
def test_zero_and_negative_amounts_are_accepted(session, amount):
    row = _add(session, Income, "Refund", "Misc", amount, datetime(2024, 3, 5))
    assert row.amount == amount


def test_get_and_delete(session):
    row = _add(session, Spend, "Rent", "Housing", 900, datetime(2024, 3, 1))
    assert records.get_record(session, Spend, row.id).name == "Rent"

    records.delete_record(session, Spend, row.id)
    with pytest.raises(NotFound):
        records.get_record(session, Spend, row.id)
    with pytest.raises(NotFound):
        records.delete_record(session, Spend, row.id)


def test_spends_and_incomes_are_separate(session):
    row = _add(session, Spend, "Rent", "Housing", 900, datetime(2024, 3, 1))
    with pytest.raises(NotFound):
        records.get_record(session, Income, row.id + 1000)
    assert records.summarize(session, Income, "2024-03").total == 0


def test_list_by_sector_filters_and_sorts(session):
    _add(session, Spend, "Early", "Food", 1, datetime(2024, 2, 1, 0, 0))
    _add(session, Spend, "Late", "Food", 2, datetime(2024, 2, 29, 23, 59))
    _add(session, Spend, "Middle", "Food", 3, datetime(2024, 2, 14, 12, 0))
    _add(session, Spend, "Other sector", "Transport", 4, datetime(2024, 2, 10))
    _add(session, Spend, "Lower case", "food", 5, datetime(2024, 2, 10))
    _add(session, Spend, "Next month", "Food", 6, datetime(2024, 3, 1, 0, 0))
    _add(session, Spend, "Previous month", "Food", 7, datetime(2024, 1, 31, 23, 59))

    rows = records.list_by_sector(session, Spend, "Food", "2024-02")
    assert [r.name for r in rows] == ["Late", "Middle", "Early"]
    assert records.list_by_sector(session, Spend, "Nothing", "2024-02") == []


def test_summary_groups_by_sector(session):
    _add(session, Spend, "Coffee", "Food", 4.5, datetime(2024, 2, 3))
    _add(session, Spend, "Lunch", "Food", 10, datetime(2024, 2, 4))
    _add(session, Spend, "Bus", "Transport", 2.5, datetime(2024, 2, 5))
    _add(session, Spend, "March", "Food", 100, datetime(2024, 3, 1))

    out = records.summarize(session, Spend, "2024-02")
    assert out.total == pytest.approx(17.0)
    assert [(g.sector, g.amount) for g in out.by_sector] == [("Food", 14.5), ("Transport", 2.5)]


def test_summary_of_empty_month(session):
    out = records.summarize(session, Spend, "1999-01")
    assert out.total == 0
    assert out.by_sector == []


def test_summary_total_matches_records_in_range():
    rng = Random(20240201)
    sectors = ["Food", "Rent", "Fun", "Travel"]

    eng = create_engine("sqlite+pysqlite:///:memory:", future=True)
    Base.metadata.create_all(eng)
    Session = sessionmaker(bind=eng, autoflush=False, autocommit=False, future=True)
    with Session() as s:
        for i in range(200):
            d = datetime(2024, 1, 1) + timedelta(hours=rng.randint(0, 24 * 120))
            _add(s, Spend, f"tx-{i}", rng.choice(sectors), round(rng.uniform(-50, 500), 2), d)

        for month in ("2024-01", "2024-02", "2024-03", "2024-04", "2024-05"):
            start, end = records.month_range(month)
            expected = sum(r.amount for r in records.records_in_range(s, Spend, start, end))
            out = records.summarize(s, Spend, month)
            assert out.total == pytest.approx(expected)
            assert out.total == pytest.approx(sum(g.amount for g in out.by_sector))
            assert len({g.sector for g in out.by_sector}) == len(out.by_sector)
    eng.dispose()
