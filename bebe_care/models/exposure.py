from bebe_care.extensions import db

class Exposure(db.Model):
    __tablename__ = "exposures"

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False, index=True)
    food_id = db.Column(db.Integer, db.ForeignKey("foods.id", ondelete="CASCADE"), nullable=False)
    notes = db.Column(db.Text, nullable=True)
    # Only written when an outcome is submitted
    tolerated = db.Column(db.Boolean, nullable=True)
    outcome = db.Column(db.String(10), nullable=True)  # ok | dudoso | malo
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    __table_args__ = (
        db.UniqueConstraint('date', 'food_id', name='uq_exposure_date_food'),
        db.CheckConstraint("outcome IN ('ok', 'dudoso', 'malo')", name='ck_exposure_outcome'),
    )
