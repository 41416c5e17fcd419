"""
User model for authentication and caption ownership.

Architecture:
    User → Caption

A user is created on registration and read on login and profile fetch.
Passwords are stored only as bcrypt hashes.
"""

from sqlalchemy import Column, Index, String
from sqlalchemy.orm import relationship

from travel_story.models.base import Base, TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin):
    """Registered account that owns captions."""

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_email", "email", unique=True),)

    full_name = Column(
        String(255),
        nullable=False,
        comment="Display name given at registration",
    )

    email = Column(
        String(320),
        nullable=False,
        comment="Unique email address used to log in",
    )

    hashed_password = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password for secure authentication",
    )

    captions = relationship(
        "Caption",
        back_populates="owner",
        doc="Captions written by this user",
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
