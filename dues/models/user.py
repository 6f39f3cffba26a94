"""User ORM model identifying a homeowner by block, lot and phase."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dues.models import Base, BaseModel


class User(Base, BaseModel):
    """
    Homeowner whose dues are tracked.

    A unit in the subdivision is addressed by phase, block and lot; the
    triple is unique so one account maps to one unit.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Owner full name",
    )
    phase: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Subdivision phase (e.g., '1', '2A')",
    )
    block: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Block identifier within the phase",
    )
    lot: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Lot identifier within the block",
    )

    payments: Mapped[list["DuePayment"]] = relationship(  # noqa: F821
        "DuePayment",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    __table_args__ = (UniqueConstraint("phase", "block", "lot", name="uq_user_unit"),)

    def __repr__(self) -> str:
        return (
            f"<User(id={self.id}, name={self.name}, phase={self.phase}, "
            f"block={self.block}, lot={self.lot})>"
        )


__all__ = ["User"]
