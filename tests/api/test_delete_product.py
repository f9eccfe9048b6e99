"""DELETE /api/products/{id}.

Invariants:
    - Deleting returns 200 with a confirmation message and removes the row
    - Deleting an already-deleted id returns 404, not an error
"""

from sqlalchemy import select

from product_api.models.product import Product


async def test_delete_returns_confirmation(client, seed_product):
    res = await client.delete(f"/api/products/{seed_product.id}")
    assert res.status_code == 200
    assert res.json() == {"data": "Product deleted"}


async def test_delete_removes_product_from_db(client, seed_product, test_db):
    product_id = seed_product.id
    await client.delete(f"/api/products/{product_id}")

    test_db.expire_all()
    result = await test_db.execute(
        select(Product).where(Product.id == product_id),
    )
    assert result.scalar_one_or_none() is None


async def test_delete_twice_returns_404(client, seed_product):
    await client.delete(f"/api/products/{seed_product.id}")
    res = await client.delete(f"/api/products/{seed_product.id}")
    assert res.status_code == 404
    assert res.json() == {"error": "Product not found"}


async def test_get_after_delete_returns_404(client, seed_product):
    await client.delete(f"/api/products/{seed_product.id}")
    res = await client.get(f"/api/products/{seed_product.id}")
    assert res.status_code == 404


async def test_delete_invalid_id_returns_400(client):
    res = await client.delete("/api/products/not-valid-url")
    assert res.status_code == 400
    assert len(res.json()["errors"]) == 1


async def test_delete_id_beyond_integer_column_returns_404(client):
    res = await client.delete("/api/products/99999999999999999999")
    assert res.status_code == 404
