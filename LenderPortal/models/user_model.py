from flask_login import UserMixin
from LenderPortal.extensions import db
from werkzeug.security import generate_password_hash, check_password_hash
from datetime import datetime


class User(UserMixin, db.Model):
    __tablename__ = "user"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(120), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=True)
    role = db.Column(db.String(50), nullable=True, default="lender")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # ===============================
    # 🔗 Relationships
    # ===============================
    lender = db.relationship(
        "Lender",
        back_populates="user",
        uselist=False,
        cascade="all, delete"
    )

    # ===============================
    # 🧩 Methods
    # ===============================
    def __repr__(self):
        return f"<User {self.username or self.email} ({self.role})>"

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)
