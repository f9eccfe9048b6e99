"""Product ORM — the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key, never reassigned
    - name and price are non-nullable; price > 0 is enforced by the rule chain
    - availability defaults to True at creation
"""

from sqlalchemy import Boolean, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from product_api.db.base import Base


class Product(Base):
    """A product offered by the catalogue."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False,
    )
    availability: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
