"""Property model."""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from launchpad.core.clock import now_ns
from launchpad.core.database import Base


class Property(Base):
    """A listing registered by an agent, who becomes its owner."""

    __tablename__ = "properties"

    # Caller supplied
    id: Mapped[str] = mapped_column(String(128), primary_key=True)

    # Address (stored verbatim, no geocoding)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(50), nullable=False)
    zip: Mapped[str] = mapped_column(String(20), nullable=False)

    owner: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    created_at: Mapped[int] = mapped_column(BigInteger, default=now_ns, nullable=False)
