from datetime import date
from ..extensions import db


class Expense(db.Model):
    __tablename__ = "expenses"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    item_name = db.Column(db.String(200), nullable=False)
    # Category name is copied, not referenced, so deleting a category keeps history intact
    category = db.Column(db.String(100), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    date = db.Column(db.Date, default=date.today, nullable=False, index=True)

    __table_args__ = (
        db.CheckConstraint("amount >= 0", name="ck_expense_amount_non_negative"),
    )
