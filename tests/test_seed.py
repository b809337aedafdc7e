"""Tests for the startup bootstrap."""

from canteen_api import config
from canteen_api.database import Base, build_engine, build_session_factory
from canteen_api.models.food import FoodItem
from canteen_api.models.user import User
from canteen_api.seed import DEMO_FOODS, bootstrap
from canteen_api.utils.security import verify_password


def _session_factory():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    return build_session_factory(engine)


def test_bootstrap_seeds_menu_and_admin() -> None:
    factory = _session_factory()

    bootstrap(factory)

    with factory() as db:
        assert db.query(FoodItem).count() == len(DEMO_FOODS) == 26
        admin = db.query(User).filter(User.is_admin.is_(True)).one()
        assert admin.email == config.ADMIN_EMAIL
        assert verify_password(config.ADMIN_PASSWORD, admin.password)
        assert db.query(FoodItem).filter(FoodItem.is_available.is_(False)).count() == 0


def test_bootstrap_is_idempotent() -> None:
    factory = _session_factory()

    bootstrap(factory)
    bootstrap(factory)

    with factory() as db:
        assert db.query(FoodItem).count() == 26
        assert db.query(User).count() == 1


def test_bootstrap_without_demo_menu() -> None:
    factory = _session_factory()

    bootstrap(factory, seed_foods=False)

    with factory() as db:
        assert db.query(FoodItem).count() == 0
        assert db.query(User).count() == 1


def test_app_without_demo_menu_starts_empty(client) -> None:
    assert client.get("/food").json() == []
