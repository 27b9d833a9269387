from sqlalchemy.types import Numeric, TypeDecorator

from . import db
from .util.conversion_util import Conversion


class LiftDecimal(TypeDecorator):
    """Weights stored as REAL, INTEGER or TEXT, always read back as ``Decimal``."""

    impl = Numeric
    cache_ok = True

    def __init__(self, *args, **kwargs):
        # asdecimal=False keeps SQLite's float-formatting result processor out of the way
        kwargs.setdefault('asdecimal', False)
        super().__init__(*args, **kwargs)

    def process_result_value(self, value, dialect):
        return Conversion.to_decimal(value)


class Result(db.Model):
    """One competition entry for one lifter.

    The table is produced by the scraper, not by this app; the columns must
    match it one for one. Recommended index:
    ``create index idx_lifter_hometown on results(lifter, hometown)``.
    """

    __tablename__ = 'results'

    # sqlite's implicit rowid doubles as the primary key and the storage order
    rowid = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.String(10))
    meet_name = db.Column(db.String(200))
    lifter = db.Column(db.String(200), index=True)
    weight_class = db.Column(db.String(20))
    competition_weight = db.Column(LiftDecimal)
    hometown = db.Column(db.String(200))
    cj1 = db.Column(LiftDecimal)
    cj2 = db.Column(LiftDecimal)
    cj3 = db.Column(LiftDecimal)
    sn1 = db.Column(LiftDecimal)
    sn2 = db.Column(LiftDecimal)
    sn3 = db.Column(LiftDecimal)
    total = db.Column(LiftDecimal)
    best_snatch = db.Column(LiftDecimal)
    best_cleanjerk = db.Column(LiftDecimal)
    url = db.Column(db.String(500))

    def __repr__(self):
        return f"<Result {self.rowid} {self.lifter} {self.date}>"
