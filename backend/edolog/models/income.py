from edolog.db.base import Base
from edolog.models.record import RecordMixin


class Income(RecordMixin, Base):
    __tablename__ = "incomes"
