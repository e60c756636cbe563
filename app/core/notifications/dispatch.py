"""
Concurrent delivery of a planned event.

All sends for one plan start together and settle independently: a failed
recipient is recorded and never cancels or delays the others. Outcomes
come back in plan order.
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from app.infra.sms import SmsSender
from .types import PlannedMessage

logger = logging.getLogger(__name__)


@dataclass
class DeliveryOutcome:
    """Send result for one recipient."""

    to: str
    kind: str
    ok: bool
    error: Optional[str] = None
    response: Any = None

    def to_dict(self) -> dict:
        result = {"to": self.to, "kind": self.kind, "ok": self.ok}
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class BatchResult:
    """Aggregate of one plan's sends."""

    outcomes: list[DeliveryOutcome] = field(default_factory=list)

    @property
    def sent(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.ok)

    @property
    def all_ok(self) -> bool:
        return self.failed == 0


async def dispatch_plan(
    messages: Sequence[PlannedMessage],
    sender: SmsSender,
) -> BatchResult:
    """
    Send every planned message concurrently.

    Args:
        messages: Messages from a successful plan
        sender: SMS transport

    Returns:
        BatchResult with one outcome per message, in plan order
    """
    if not messages:
        return BatchResult()

    results = await asyncio.gather(
        *(sender.send(m.to, m.text) for m in messages),
        return_exceptions=True,
    )

    outcomes = []
    for message, result in zip(messages, results):
        if isinstance(result, BaseException):
            logger.error(f"SMS to {message.to} ({message.kind}) failed: {result}")
            outcomes.append(DeliveryOutcome(
                to=message.to,
                kind=message.kind,
                ok=False,
                error=str(result) or type(result).__name__,
            ))
        else:
            outcomes.append(DeliveryOutcome(
                to=message.to,
                kind=message.kind,
                ok=True,
                response=result,
            ))

    batch = BatchResult(outcomes=outcomes)
    logger.info(f"Dispatched {len(outcomes)} SMS: {batch.sent} sent, {batch.failed} failed")
    return batch
