"""
Caption model: a travel story written by a user.

A caption ties a title and narrative to a visited place, a date and an
uploaded image. Captions are listed per owner with favourites first.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

from travel_story.models.base import Base, TimestampMixin


class Caption(Base, TimestampMixin):
    """Travel story entry owned by exactly one user."""

    __tablename__ = "captions"
    __table_args__ = (
        Index("ix_captions_user_id_favourite", "user_id", "is_favourite"),
    )

    # SQLite only autoincrements a plain INTEGER primary key
    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Increasing sequence; also the insertion order of captions",
    )

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        comment="Owner of the caption",
    )

    title = Column(String(255), nullable=False)
    story = Column(Text, nullable=False)
    visited_location = Column(String(255), nullable=False)
    image_url = Column(Text, nullable=False)

    visited_date = Column(
        DateTime(timezone=True),
        nullable=False,
        comment="When the place was visited",
    )

    is_favourite = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="Favourite captions are listed first",
    )

    owner = relationship("User", back_populates="captions")

    def __repr__(self):
        return f"<Caption(id={self.id}, title='{self.title}', user_id={self.user_id})>"
