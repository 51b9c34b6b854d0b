"""
User accounts and their roles.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from kasir.core.database import Base


class User(Base):
    """Model for application users (cashiers and admins)."""
    __tablename__ = "users"
    __private_fields__ = ("password_hash",)

    id = Column(Integer, primary_key=True, index=True)
    nama = Column(String(100), nullable=False)
    username = Column(String(50), unique=True, index=True, nullable=False)
    password_hash = Column("password", String(255), nullable=False)
    role = Column(String(20), nullable=False, default="kasir")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
