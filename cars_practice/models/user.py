"""User model: one account per email."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from cars_practice.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    sessions = relationship(
        "PracticeSession", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    progress = relationship(
        "UserProgress", back_populates="user", uselist=False, cascade="all, delete-orphan", passive_deletes=True
    )
