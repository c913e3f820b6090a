"""Category model."""

from sqlalchemy import Column, Integer, String

from src.database import Base


class Category(Base):
    """Waste-type tag (batteries, textiles, ...). Static reference data."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
