"""Product Repository — the six persistence operations behind the product routes.

Invariants:
    - Constructed per request with an explicit AsyncSession; holds no other state
    - Every id-addressed operation raises ProductNotFoundError when the row is absent,
      including ids outside the INTEGER column range (never sent to the driver)
    - availability is never set on create (column default True)
    - Each write commits on its own; no operation spans more than one row
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.errors import ProductNotFoundError
from product_api.models.product import Product

logger = logging.getLogger(__name__)

# products.id is a 32-bit INTEGER column; ids outside it cannot exist
_MIN_ID = -(2 ** 31)
_MAX_ID = 2 ** 31 - 1


class ProductRepository:
    """CRUD over the products table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_products(self) -> list[Product]:
        result = await self.db.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    async def get_product(self, product_id: int) -> Product:
        """Get product or raise 404."""
        if not _MIN_ID <= product_id <= _MAX_ID:
            raise ProductNotFoundError(product_id)
        product = await self.db.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create_product(self, name: str, price: float) -> Product:
        product = Product(name=name, price=price)
        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        logger.info("Product created", extra={"product_id": product.id})
        return product

    async def update_product(
        self, product_id: int, name: str, price: float, availability: bool,
    ) -> Product:
        """Overwrite name, price and availability."""
        product = await self.get_product(product_id)
        product.name = name
        product.price = price
        product.availability = availability
        await self.db.commit()
        await self.db.refresh(product)
        logger.info("Product updated", extra={"product_id": product_id})
        return product

    async def toggle_availability(self, product_id: int) -> Product:
        """Negate the stored availability flag."""
        product = await self.get_product(product_id)
        product.availability = not product.availability
        await self.db.commit()
        await self.db.refresh(product)
        logger.info(
            f"Product availability set to {product.availability}",
            extra={"product_id": product_id},
        )
        return product

    async def delete_product(self, product_id: int) -> None:
        product = await self.get_product(product_id)
        await self.db.delete(product)
        await self.db.commit()
        logger.info("Product deleted", extra={"product_id": product_id})
