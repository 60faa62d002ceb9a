from ..extensions import db


class ProteinFood(db.Model):
    __tablename__ = "protein_foods"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, unique=True)
    protein_per_unit = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(20), nullable=False, default="g")
    default_quantity = db.Column(db.Float, nullable=False, default=100)
    emoji = db.Column(db.String(16), default="🍽️")
    sort_order = db.Column(db.Integer, nullable=False, default=0)
