from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from canteen_api.database import Base


class FavoriteRecord(Base):
    __tablename__ = "favorites"
    __table_args__ = (UniqueConstraint("user_id", "food_id", name="uq_favorites_user_food"),)

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    food_id = Column(Integer, ForeignKey("food_items.id", ondelete="CASCADE"), nullable=False)

    user = relationship("User", back_populates="favorites")
    food = relationship("FoodItem", back_populates="favorites")
