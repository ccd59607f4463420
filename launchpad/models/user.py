"""User profile and role assignment models."""

from typing import Optional

from sqlalchemy import BigInteger, Enum as SQLEnum, String
from sqlalchemy.orm import Mapped, mapped_column

from launchpad.core.clock import now_ns
from launchpad.core.database import Base
from launchpad.models.enums import Role


class UserProfile(Base):
    """Display profile of a principal, created by its owner on first login."""

    __tablename__ = "user_profiles"

    principal: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        SQLEnum(Role),
        default=Role.USER,
        nullable=False,
    )

    created_at: Mapped[int] = mapped_column(BigInteger, default=now_ns, nullable=False)
    updated_at: Mapped[int] = mapped_column(
        BigInteger, default=now_ns, onupdate=now_ns, nullable=False
    )


class RoleAssignment(Base):
    """Role granted to a principal by an admin (or the startup bootstrap).

    Exists independently of the profile so a role can be granted before the
    principal has logged in for the first time.
    """

    __tablename__ = "role_assignments"

    principal: Mapped[str] = mapped_column(String(128), primary_key=True)
    role: Mapped[Role] = mapped_column(SQLEnum(Role), nullable=False)
    assigned_by: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    assigned_at: Mapped[int] = mapped_column(BigInteger, default=now_ns, nullable=False)
