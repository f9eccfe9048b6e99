"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model is imported here so Base.metadata knows it before create_all runs
"""

from product_api.models.product import Product  # noqa: F401
