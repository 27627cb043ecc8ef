"""
SQLAlchemy ORM models.

Tables
------
* ``schools`` -- registered schools with their coordinates

Coordinates are plain floats; proximity is computed in Python, so no
spatial index is needed.
"""

from sqlalchemy import Column, DateTime, Float, Integer, String, func

from .database import Base


class SchoolModel(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
