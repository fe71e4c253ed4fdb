from bebe_care.extensions import db

class DailyFoodCheck(db.Model):
    __tablename__ = "daily_food_checks"

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False, index=True)
    food_id = db.Column(db.Integer, db.ForeignKey("foods.id", ondelete="CASCADE"), nullable=False)
    meal = db.Column(db.String(20), nullable=False)  # manana | comida | merienda | cena
    checked = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    __table_args__ = (
        db.UniqueConstraint('date', 'food_id', 'meal', name='uq_daily_food_check'),
    )
