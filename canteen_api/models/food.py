from sqlalchemy import Boolean, Column, DateTime, DECIMAL, Integer, String, func
from sqlalchemy.orm import relationship
from canteen_api.database import Base

HIGH_PROTEIN_GRAMS = 15


class FoodItem(Base):
    __tablename__ = "food_items"

    id           = Column(Integer, primary_key=True)
    name         = Column(String(255), nullable=False, index=True)
    calories     = Column(Integer, nullable=False)
    protein      = Column(DECIMAL(10, 2, asdecimal=False), nullable=False)
    carbs        = Column(DECIMAL(10, 2, asdecimal=False), nullable=False)
    fats         = Column(DECIMAL(10, 2, asdecimal=False), nullable=False)
    is_veg       = Column(Boolean, nullable=False, default=True)
    is_available = Column(Boolean, nullable=False, default=True)
    created_at   = Column(DateTime(timezone=False), server_default=func.now(), nullable=False)

    # deleting a food also removes its intake and favorite rows
    intakes = relationship(
        "IntakeRecord",
        back_populates="food",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    favorites = relationship(
        "FavoriteRecord",
        back_populates="food",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
