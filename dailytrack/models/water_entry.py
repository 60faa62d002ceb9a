from datetime import date, datetime
from ..extensions import db


class WaterEntry(db.Model):
    __tablename__ = "water_entries"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    amount_ml = db.Column(db.Float, nullable=False)
    date = db.Column(db.Date, default=date.today, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.CheckConstraint("amount_ml > 0", name="ck_water_amount_positive"),
    )
