"""
Concurrent mutation dispatcher
Runs one per-product operation for many ids and reports an Outcome
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from catalogsync.models.bulk_edit import FailedItem, Outcome

logger = logging.getLogger(__name__)

Operation = Callable[[str], Awaitable[Any]]


def error_message(error: BaseException) -> str:
    """Human readable text for an Outcome failure entry"""
    message = getattr(error, "message", None) or str(error)
    return message or "Unknown error"


async def dispatch(
    ids: Sequence[str],
    operation: Operation,
    max_concurrency: Optional[int] = None
) -> Outcome:
    """
    Apply `operation` to every id concurrently

    Each call is isolated: an exception is recorded against its id and never
    cancels the others. Returns once every call has settled. Duplicate ids are
    collapsed so each id appears exactly once in the Outcome. Lists follow
    completion order, not input order.

    Args:
        ids: Product IDs
        operation: Coroutine function taking one id
        max_concurrency: Optional cap on calls in flight at once

    Returns:
        Outcome
    """
    outcome = Outcome()
    unique_ids = list(dict.fromkeys(ids))

    if not unique_ids:
        return outcome

    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def run(product_id: str):
        try:
            if semaphore is None:
                await operation(product_id)
            else:
                async with semaphore:
                    await operation(product_id)
        except Exception as e:
            outcome.failed.append(FailedItem(id=product_id, error=error_message(e)))
        else:
            outcome.success.append(product_id)

    await asyncio.gather(*(run(product_id) for product_id in unique_ids))

    logger.info(f"Dispatched {len(unique_ids)} operations: {len(outcome.success)} succeeded, {len(outcome.failed)} failed")
    return outcome
