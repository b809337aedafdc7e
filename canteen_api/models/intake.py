from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import relationship
from canteen_api.database import Base


class IntakeRecord(Base):
    __tablename__ = "daily_intake"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    food_id = Column(Integer, ForeignKey("food_items.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    date = Column(Date, nullable=False, index=True)  # calendar day, no time component
    created_at = Column(DateTime(timezone=False), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="intakes")
    food = relationship("FoodItem", back_populates="intakes")
