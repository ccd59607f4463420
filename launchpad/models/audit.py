"""AuditLog model."""

import uuid
from typing import Any, Optional

from sqlalchemy import JSON, BigInteger, Enum as SQLEnum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from launchpad.core.clock import now_ns
from launchpad.core.database import Base
from launchpad.models.enums import AuditAction


class AuditLog(Base):
    """Immutable audit log of state changes."""

    __tablename__ = "audit_log"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Principal who performed the action (None for anonymous submissions)
    actor: Mapped[Optional[str]] = mapped_column(String(128), nullable=True, index=True)

    action: Mapped[AuditAction] = mapped_column(
        SQLEnum(AuditAction),
        nullable=False,
        index=True,
    )

    # Resource being acted upon
    resource_type: Mapped[str] = mapped_column(String(50), nullable=False)
    resource_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)

    details: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[int] = mapped_column(BigInteger, default=now_ns, nullable=False, index=True)
