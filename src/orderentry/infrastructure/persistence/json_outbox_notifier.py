"""Notifier that queues confirmations in a JSON outbox file.

Stands in for the email service: each message is appended to the
outbox and logged, for a mail relay to pick up.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from orderentry.domain.gateway.notifier import Notifier
from orderentry.infrastructure.persistence._json_file import JsonFile

logger = logging.getLogger(__name__)


class JsonOutboxNotifier(Notifier):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def send_order_confirmation(self, customer_id: int, order_id: int) -> None:
        messages = self._file.read()
        messages.append(
            {
                "kind": "order_confirmation",
                "customer_id": customer_id,
                "order_id": order_id,
                "queued_at": datetime.now(timezone.utc).isoformat(),
            }
        )
        self._file.write(messages)
        logger.info(
            "Queued order confirmation for customer #%s (order #%s)",
            customer_id,
            order_id,
        )
