from datetime import date
from ..extensions import db


class ProteinEntry(db.Model):
    __tablename__ = "protein_entries"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    food_id = db.Column(db.Integer, db.ForeignKey("protein_foods.id", ondelete="SET NULL"), nullable=True)
    food_name = db.Column(db.String(120), nullable=False)
    quantity = db.Column(db.Float, nullable=False)
    protein_amount = db.Column(db.Float, nullable=False)  # grams, computed on write
    date = db.Column(db.Date, default=date.today, nullable=False, index=True)

    __table_args__ = (
        db.CheckConstraint("protein_amount >= 0", name="ck_protein_amount_non_negative"),
    )
