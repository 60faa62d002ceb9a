from ..extensions import db

ROLES = ("admin", "user")


class UserRole(db.Model):
    __tablename__ = "user_roles"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="user")

    __table_args__ = (
        db.UniqueConstraint("user_id", "role", name="uq_user_role"),
    )
