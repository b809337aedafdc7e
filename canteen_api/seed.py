"""Startup bootstrap: demo canteen menu and the admin account."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, sessionmaker

from canteen_api import config
from canteen_api.models.food import FoodItem
from canteen_api.models.user import User
from canteen_api.utils.security import hash_password

logger = logging.getLogger(__name__)

# (name, calories, protein, carbs, fats, is_veg)
DEMO_FOODS = [
    ("Veg Thali", 450, 15, 60, 18, True),
    ("Samosa (2pc)", 260, 5, 28, 14, True),
    ("Paneer Roll", 380, 12, 35, 22, True),
    ("Masala Dosa", 300, 6, 45, 10, True),
    ("Chole Bhature", 520, 14, 58, 26, True),
    ("Idli Sambhar (3pc)", 210, 6, 38, 4, True),
    ("Grilled Sandwich", 280, 10, 32, 12, True),
    ("Veg Biryani", 420, 10, 55, 18, True),
    ("Aloo Paratha", 350, 8, 42, 16, True),
    ("Pav Bhaji", 380, 9, 48, 16, True),
    ("Dal Rice", 320, 12, 50, 8, True),
    ("Poha", 180, 4, 32, 4, True),
    ("Upma", 200, 5, 35, 5, True),
    ("Egg Biryani", 480, 18, 55, 20, False),
    ("Chicken Roll", 420, 22, 38, 20, False),
    ("Egg Curry with Rice", 450, 16, 52, 18, False),
    ("Chicken Sandwich", 350, 20, 30, 15, False),
    ("Cold Coffee", 190, 5, 28, 6, True),
    ("Fresh Lime Soda", 80, 0, 20, 0, True),
    ("Mango Lassi", 220, 6, 35, 6, True),
    ("Masala Chai", 90, 2, 14, 3, True),
    ("Buttermilk", 60, 2, 8, 2, True),
    ("French Fries", 320, 4, 40, 16, True),
    ("Veg Momos (6pc)", 250, 6, 35, 10, True),
    ("Spring Roll (2pc)", 220, 4, 28, 10, True),
    ("Bread Pakora", 280, 6, 32, 14, True),
]


def _seed_foods(db: Session) -> int:
    if db.query(func.count(FoodItem.id)).scalar():
        return 0
    db.add_all(
        FoodItem(name=name, calories=kcal, protein=p, carbs=c, fats=f, is_veg=veg)
        for name, kcal, p, c, f, veg in DEMO_FOODS
    )
    return len(DEMO_FOODS)


def _ensure_admin(db: Session) -> bool:
    if db.query(User).filter(User.is_admin.is_(True)).first():
        return False
    db.add(
        User(
            email=config.ADMIN_EMAIL,
            password=hash_password(config.ADMIN_PASSWORD),
            name=config.ADMIN_NAME,
            is_admin=True,
        )
    )
    return True


def bootstrap(session_factory: sessionmaker, seed_foods: bool = True) -> None:
    """Seed the catalog and admin account in one transaction."""
    with session_factory() as db, db.begin():
        added = _seed_foods(db) if seed_foods else 0
        admin_created = _ensure_admin(db)
    if added:
        logger.info("Seeded %d demo food items", added)
    if admin_created:
        logger.info("Created admin user %s", config.ADMIN_EMAIL)
