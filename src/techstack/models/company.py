"""Company model."""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from techstack.models.base import Base, JSONBType


class Company(Base):
    """Company document as stored in the bulk company store."""

    __tablename__ = "companies"

    # Ids come from the source dataset and are never reused
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)

    # Basic Info
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    domain: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    # Facets
    industry: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    category: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    hq_country: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    founded: Mapped[int | None] = mapped_column(Integer)

    # Size
    revenue: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)  # whole USD
    employees: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Array fields
    technologies: Mapped[list[str]] = mapped_column(JSONBType, nullable=False, default=list)
    office_locations: Mapped[list[str]] = mapped_column(JSONBType, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, name='{self.name}', domain='{self.domain}')>"
