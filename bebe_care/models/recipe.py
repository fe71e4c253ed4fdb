from bebe_care.extensions import db

recipe_foods = db.Table(
    "recipe_foods",
    db.Column("recipe_id", db.Integer, db.ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True),
    db.Column("food_id", db.Integer, db.ForeignKey("foods.id", ondelete="CASCADE"), primary_key=True),
)


class Recipe(db.Model):
    __tablename__ = "recipes"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    suitable_from = db.Column(db.Integer, nullable=False)  # recommended month (6..12)
    steps = db.Column(db.Text, nullable=False)
    freeze_ok = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    foods = db.relationship("Food", secondary=recipe_foods, backref="recipes", passive_deletes=True)
