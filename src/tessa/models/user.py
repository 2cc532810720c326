"""
User ORM model.

Manager and employee accounts scoped under exactly one owner.
"""

from sqlalchemy import Column, String, Enum, ForeignKey
from sqlalchemy.orm import relationship

from models.base import Base, TimestampMixin
from models.enums import UserRole


class User(TimestampMixin, Base):
    """User record; its id doubles as the identity provider uid."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    owner_id = Column(String(36), ForeignKey("owners.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    role = Column(
        Enum(UserRole, native_enum=False, length=20, validate_strings=True),
        nullable=False,
        default=UserRole.EMPLOYEE,
    )

    owner = relationship("Owner", back_populates="users")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"
