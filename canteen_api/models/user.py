from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, func
from sqlalchemy.orm import relationship
from canteen_api.database import Base

GENDERS = ("male", "female")
ACTIVITY_LEVELS = ("low", "medium", "high")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(200), nullable=False)
    name = Column(String(100), nullable=False)
    height = Column(Float, nullable=False, default=170)
    weight = Column(Float, nullable=False, default=70)
    age = Column(Integer, nullable=False, default=25)
    gender = Column(String(10), nullable=False, default="male")
    activity_level = Column(String(10), nullable=False, default="medium")
    daily_calorie_goal = Column(Integer, nullable=False, default=2000)
    is_admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=False), server_default=func.now(), nullable=False)

    intakes = relationship(
        "IntakeRecord",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    favorites = relationship(
        "FavoriteRecord",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
