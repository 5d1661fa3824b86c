from edolog.db.base import Base
from edolog.models.record import RecordMixin


class Spend(RecordMixin, Base):
    __tablename__ = "spends"
