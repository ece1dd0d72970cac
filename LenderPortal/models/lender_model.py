from datetime import datetime
from LenderPortal.extensions import db


# ====================================
# 🧍 Lender
# ====================================
class Lender(db.Model):
    __tablename__ = "lender"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False, unique=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    country_code = db.Column(db.String(2), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    user = db.relationship("User", back_populates="lender")
    profile = db.relationship(
        "Profile",
        back_populates="lender",
        uselist=False,
        cascade="all, delete-orphan"
    )

    @property
    def full_name(self):
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def __repr__(self):
        return f"<Lender {self.full_name}>"


# ====================================
# 📝 Lender Profile
# ====================================
class Profile(db.Model):
    __tablename__ = "lender_profile"

    id = db.Column(db.Integer, primary_key=True)
    lender_id = db.Column(db.Integer, db.ForeignKey("lender.id"), nullable=False, unique=True)
    about_me = db.Column(db.Text, nullable=True)
    picture_path = db.Column(db.String(255), nullable=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    lender = db.relationship("Lender", back_populates="profile")

    def __repr__(self):
        return f"<Profile lender={self.lender_id}>"
