"""
Owner ORM model.

Top-level tenant accounts created through registration.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from models.base import Base, TimestampMixin
from models.enums import OwnerRole


class Owner(TimestampMixin, Base):
    """Owner record; its id doubles as the identity provider uid."""

    __tablename__ = "owners"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    role = Column(String(20), nullable=False, default=OwnerRole.OWNER.value)

    users = relationship("User", back_populates="owner", passive_deletes=True)

    def __repr__(self):
        return f"<Owner(id={self.id}, email='{self.email}')>"
