import pytest

from bebe_care import create_app
from bebe_care.extensions import db
from bebe_care.models.food import Food


@pytest.fixture()
def app():
    # Fresh in-memory database per test
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_ENGINE_OPTIONS": {},
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "SECRET_KEY": "test-secret",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_food(app):
    def _make(name="Huevo", category="proteina", allergen=True):
        food = Food(name=name, category=category, allergen=allergen)
        db.session.add(food)
        db.session.commit()
        return food.id
    return _make
