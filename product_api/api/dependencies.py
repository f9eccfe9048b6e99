"""Route Dependencies — body reading, rule-chain gate and repository wiring.

Invariants:
    - read_json_body() always returns a dict; missing or non-object bodies become {}
    - validate_request(rules) raises InputValidationError with every failed rule, or
      returns the body untouched
    - Validation runs before the repository touches the datastore
"""

import json
import logging
from typing import Any, Awaitable, Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.errors import InputValidationError
from product_api.core.validation import FieldRule, check_rules
from product_api.infrastructure.database import get_db
from product_api.services.product_repository import ProductRepository

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> dict[str, Any]:
    """Parse the request body as a JSON object."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.debug(f"Ignoring non-JSON body on {request.url.path}")
        return {}
    return payload if isinstance(payload, dict) else {}


def validate_request(
    rules: tuple[FieldRule, ...],
) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Build a dependency that applies a rule chain to path params and body."""

    async def dependency(
        request: Request, body: dict[str, Any] = Depends(read_json_body),
    ) -> dict[str, Any]:
        errors = check_rules(rules, dict(request.path_params), body)
        if errors:
            logger.info(
                f"Rejected request on {request.url.path}",
                extra={"path": request.url.path, "error_count": len(errors)},
            )
            raise InputValidationError(errors)
        return body

    return dependency


def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    return ProductRepository(db)
