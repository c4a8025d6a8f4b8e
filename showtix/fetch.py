"""Page through an event's transactions until the API returns an empty page."""

from __future__ import annotations

import logging
from typing import List, Optional

from .client import ShowtixClient
from .constants import FIRST_PAGE, TRANSACTIONS_URL
from .models import Customer

LOG = logging.getLogger(__name__)


def fetch_customers(
    event_id: str,
    auth_token: str,
    *,
    base_url: str = TRANSACTIONS_URL,
    client: Optional[ShowtixClient] = None,
) -> List[Customer]:
    """Return every customer record for ``event_id``, in page order.

    Pages are requested one at a time starting at page 1; the first page
    with no customers ends the loop. Any client error propagates and the
    customers gathered so far are discarded.
    """
    if client is None:
        with ShowtixClient(auth_token, base_url=base_url) as owned:
            return _fetch_pages(owned, event_id)
    return _fetch_pages(client, event_id)


def _fetch_pages(client: ShowtixClient, event_id: str) -> List[Customer]:
    customers: List[Customer] = []
    page = FIRST_PAGE
    while True:
        batch = client.search_transactions(event_id, page)
        LOG.info("event %s page %d: %d customer(s)", event_id, page, len(batch))
        if not batch:
            break
        customers.extend(batch)
        page += 1
    return customers
