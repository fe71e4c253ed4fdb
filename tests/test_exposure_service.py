from datetime import date, timedelta

import pytest

from bebe_care.extensions import db
from bebe_care.models.daily_check import DailyFoodCheck
from bebe_care.models.exposure import Exposure
from bebe_care.services.errors import InvalidStateError, NotFoundError, ValidationError
from bebe_care.services import check_service, exposure_service
from bebe_care.services.check_service import upsert_check
from bebe_care.services.exposure_service import list_exposures, register_exposure
from bebe_care.services.outcome_service import submit_outcome

D = date(2024, 5, 6)
TODAY = date(2024, 6, 20)


def days(n):
    return timedelta(days=n)


def exposures_for(food_id):
    return Exposure.query.filter_by(food_id=food_id).order_by(Exposure.date).all()


def test_third_exposure_in_window_requests_outcome(make_food):
    food_id = make_food()

    assert register_exposure(D, food_id)["needsOutcome"] is False
    assert register_exposure(D + days(2), food_id)["needsOutcome"] is False

    third = register_exposure(D + days(5), food_id)
    assert third["windowCount"] == 3
    assert third["needsOutcome"] is True

    fourth = register_exposure(D + days(6), food_id)
    assert fourth["windowCount"] == 4
    assert fourth["needsOutcome"] is False


def test_exposures_outside_window_are_not_counted(make_food):
    food_id = make_food()
    register_exposure(D, food_id)
    register_exposure(D + days(3), food_id)

    result = register_exposure(D + days(7), food_id)
    assert result["windowCount"] == 2
    assert result["needsOutcome"] is False


def test_backfilled_exposure_counts_relative_to_its_own_date(make_food):
    food_id = make_food()
    register_exposure(D + days(20), food_id)
    register_exposure(D - days(2), food_id)
    register_exposure(D - days(1), food_id)

    result = register_exposure(D, food_id)
    assert result["windowCount"] == 3
    assert result["needsOutcome"] is True


def test_window_is_per_food(make_food):
    egg = make_food("Huevo", "proteina", True)
    bread = make_food("Pan", "cereal", True)
    register_exposure(D, egg)
    register_exposure(D + days(1), bread)

    assert register_exposure(D + days(2), egg)["windowCount"] == 2


def test_same_day_registration_updates_notes_only(make_food):
    food_id = make_food()
    register_exposure(TODAY - days(4), food_id)
    register_exposure(TODAY - days(2), food_id)
    first = register_exposure(TODAY, food_id, "primera vez")
    submit_outcome(food_id, "ok", today=TODAY)

    second = register_exposure(TODAY, food_id, "un poco de rojez")

    rows = Exposure.query.filter_by(food_id=food_id, date=TODAY).all()
    assert len(rows) == 1
    assert rows[0].notes == "un poco de rojez"
    assert rows[0].outcome == "ok"
    assert rows[0].tolerated is True
    assert second["id"] == first["id"]
    assert second["created_at"] == first["created_at"]
    # repeat registration does not add to the window
    assert second["windowCount"] == 3


def test_register_accepts_iso_string_dates(make_food):
    food_id = make_food()
    result = register_exposure("2024-05-06", food_id, "")
    assert result["date"] == "2024-05-06"
    assert result["notes"] is None


def test_register_requires_date_and_food(make_food):
    food_id = make_food()
    with pytest.raises(ValidationError):
        register_exposure(D, None)
    with pytest.raises(ValidationError):
        register_exposure(D, 0)
    with pytest.raises(ValidationError):
        register_exposure(None, food_id)
    with pytest.raises(ValidationError):
        register_exposure("06/05/2024", food_id)


def test_register_unknown_food_is_not_found(make_food):
    make_food()
    with pytest.raises(NotFoundError):
        register_exposure(D, 9999)
    assert Exposure.query.count() == 0


def test_register_food_deleted_after_lookup_is_not_found(make_food, monkeypatch):
    food_id = make_food()
    # lookup passes, the foreign key rejects the insert
    monkeypatch.setattr(exposure_service, "food_exists", lambda _id: True)

    with pytest.raises(NotFoundError):
        register_exposure(D, food_id + 1)
    assert Exposure.query.count() == 0

    register_exposure(D, food_id)
    assert Exposure.query.count() == 1


def test_check_for_food_deleted_after_lookup_is_not_found(make_food, monkeypatch):
    food_id = make_food()
    monkeypatch.setattr(check_service, "food_exists", lambda _id: True)

    with pytest.raises(NotFoundError):
        upsert_check(D, food_id + 1, "comida", True)
    assert DailyFoodCheck.query.count() == 0


def test_check_requires_positive_food_id(make_food):
    make_food()
    with pytest.raises(ValidationError):
        upsert_check(D, 0, "comida")


@pytest.mark.parametrize("offsets", [(0, 3), (0, 1, 3, 6)])
def test_outcome_rejected_unless_exactly_three_in_window(make_food, offsets):
    food_id = make_food()
    for offset in offsets:
        register_exposure(TODAY - days(offset), food_id)

    with pytest.raises(InvalidStateError):
        submit_outcome(food_id, "ok", today=TODAY)

    # nothing was written
    assert all(e.outcome is None and e.tolerated is None for e in exposures_for(food_id))


def test_outcome_accepted_with_exactly_three_in_window(make_food):
    food_id = make_food()
    for offset in (0, 2, 6):
        register_exposure(TODAY - days(offset), food_id)

    assert submit_outcome(food_id, "dudoso", today=TODAY) == {"ok": True}


def test_outcome_window_is_anchored_at_today(make_food):
    food_id = make_food()
    for offset in (7, 8, 9):
        register_exposure(TODAY - days(offset), food_id)

    with pytest.raises(InvalidStateError):
        submit_outcome(food_id, "ok", today=TODAY)


def test_ok_outcome_fans_out_to_window_and_tolerates_all_history(make_food):
    food_id = make_food()
    old = TODAY - days(30)
    register_exposure(old, food_id)
    for offset in (0, 3, 5):
        register_exposure(TODAY - days(offset), food_id)

    submit_outcome(food_id, "ok", today=TODAY)

    rows = exposures_for(food_id)
    in_window = [e for e in rows if e.date != old]
    assert all(e.outcome == "ok" for e in in_window)
    assert [e.outcome for e in rows if e.date == old] == [None]
    assert all(e.tolerated is True for e in rows)


def test_later_bad_outcome_overwrites_tolerated_globally(make_food):
    food_id = make_food()
    earlier = TODAY - days(20)
    for offset in (0, 1, 2):
        register_exposure(earlier - days(offset), food_id)
    submit_outcome(food_id, "ok", today=earlier)
    assert all(e.tolerated is True for e in exposures_for(food_id))

    for offset in (0, 1, 2):
        register_exposure(TODAY - days(offset), food_id)
    submit_outcome(food_id, "malo", today=TODAY)

    rows = exposures_for(food_id)
    assert all(e.tolerated is False for e in rows)
    # verdict of the earlier window is kept on its rows
    assert [e.outcome for e in rows] == ["ok", "ok", "ok", "malo", "malo", "malo"]


def test_outcome_does_not_touch_other_foods(make_food):
    egg = make_food("Huevo", "proteina", True)
    rice = make_food("Arroz", "cereal", False)
    for offset in (0, 1, 2):
        register_exposure(TODAY - days(offset), egg)
    register_exposure(TODAY, rice)

    submit_outcome(egg, "malo", today=TODAY)

    rice_row = exposures_for(rice)[0]
    assert rice_row.outcome is None
    assert rice_row.tolerated is None


@pytest.mark.parametrize("outcome", ["unsure", "OK", "", None])
def test_outcome_value_must_be_known(make_food, outcome):
    food_id = make_food()
    with pytest.raises(ValidationError):
        submit_outcome(food_id, outcome, today=TODAY)


def test_outcome_requires_food(app):
    with pytest.raises(ValidationError):
        submit_outcome(None, "ok", today=TODAY)
    with pytest.raises(ValidationError):
        submit_outcome(0, "ok", today=TODAY)


def test_list_exposures_joins_food_and_orders(make_food):
    egg = make_food("Huevo", "proteina", True)
    apple = make_food("Manzana", "fruta", False)
    register_exposure(D, egg)
    register_exposure(D, apple)
    register_exposure(D + days(1), egg, "bien")
    register_exposure(D + days(10), apple)

    rows = list_exposures(D, D + days(1))
    assert [(r["date"], r["food_name"]) for r in rows] == [
        ("2024-05-07", "Huevo"),
        ("2024-05-06", "Huevo"),
        ("2024-05-06", "Manzana"),
    ]
    assert rows[0]["category"] == "proteina"
    assert rows[0]["allergen"] is True
    assert rows[0]["notes"] == "bien"

    assert len(list_exposures()) == 4
    assert len(list_exposures(date_from=D + days(2))) == 1
    assert len(list_exposures(date_to="2024-05-06")) == 2


def test_list_exposures_rejects_bad_dates(app):
    with pytest.raises(ValidationError):
        list_exposures(date_from="yesterday")


def test_failed_registration_leaves_session_usable(make_food):
    food_id = make_food()
    with pytest.raises(NotFoundError):
        register_exposure(D, food_id + 1)

    register_exposure(D, food_id)
    assert db.session.query(Exposure).count() == 1
