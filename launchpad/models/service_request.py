"""ServiceRequest and ServiceRequestPhoto models."""

from typing import Optional

from sqlalchemy import BigInteger, Enum as SQLEnum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from launchpad.core.clock import now_ns
from launchpad.core.database import Base
from launchpad.models.enums import ServiceRequestStatus, Urgency

REQUEST_ID_PREFIX = "r"


def parse_request_id(request_id: str) -> Optional[int]:
    """Map an external request id ("r12") to its storage key, None if malformed."""
    if not request_id.startswith(REQUEST_ID_PREFIX):
        return None
    digits = request_id[len(REQUEST_ID_PREFIX):]
    if not digits.isdigit():
        return None
    return int(digits)


class ServiceRequest(Base):
    """A maintenance request filed by an agent against a property."""

    __tablename__ = "service_requests"

    # Storage key; the external id is derived from it
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[str] = mapped_column(
        String(128),
        ForeignKey("properties.id"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    urgency: Mapped[Urgency] = mapped_column(SQLEnum(Urgency), nullable=False)
    status: Mapped[ServiceRequestStatus] = mapped_column(
        SQLEnum(ServiceRequestStatus),
        default=ServiceRequestStatus.PENDING,
        nullable=False,
        index=True,
    )

    created_by: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    created_at: Mapped[int] = mapped_column(BigInteger, default=now_ns, nullable=False)
    # Refreshed explicitly on status changes and photo attachments
    updated_at: Mapped[int] = mapped_column(BigInteger, default=now_ns, nullable=False)

    # Relationships
    photo_rows: Mapped[list["ServiceRequestPhoto"]] = relationship(
        "ServiceRequestPhoto",
        back_populates="service_request",
        order_by="ServiceRequestPhoto.id",
        lazy="selectin",
    )

    @property
    def id(self) -> str:
        return f"{REQUEST_ID_PREFIX}{self.seq}"

    @property
    def photos(self) -> list[str]:
        """Content references in attachment order."""
        return [row.content_ref for row in self.photo_rows]


class ServiceRequestPhoto(Base):
    """Opaque content reference attached to a service request. Append only."""

    __tablename__ = "service_request_photos"

    # Autoincrement id defines attachment order
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    request_seq: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("service_requests.seq", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content_ref: Mapped[str] = mapped_column(String(1024), nullable=False)
    uploaded_by: Mapped[str] = mapped_column(String(128), nullable=False)
    uploaded_at: Mapped[int] = mapped_column(BigInteger, default=now_ns, nullable=False)

    service_request: Mapped["ServiceRequest"] = relationship(
        "ServiceRequest", back_populates="photo_rows"
    )
