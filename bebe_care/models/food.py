from bebe_care.extensions import db

class Food(db.Model):
    __tablename__ = "foods"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), unique=True, nullable=False)
    category = db.Column(db.String(20), nullable=False)  # fruta | verdura | proteina | cereal
    allergen = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    exposures = db.relationship("Exposure", backref="food", cascade="all, delete-orphan", passive_deletes=True)
    checks = db.relationship("DailyFoodCheck", backref="food", cascade="all, delete-orphan", passive_deletes=True)
