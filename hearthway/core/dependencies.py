import logging

from fastapi import HTTPException

from hearthway.core.errors import ValidationError

logger = logging.getLogger(__name__)


def could_not_compute(e: ValidationError) -> HTTPException:
    logger.info("Balance computation rejected: %s", e.message)
    return HTTPException(status_code=422, detail=f"Could not compute balances: {e.message}")
