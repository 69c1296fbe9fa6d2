"""Prometheus metrics for ordercore.

Defines and exposes operational metrics for monitoring and alerting.
"""

from prometheus_client import Counter

# Order metrics
draft_orders_created_total = Counter(
    "ordercore_draft_orders_created_total",
    "Total number of draft orders created",
    ["buyer_source"]  # buyer_source: argument|config|placeholder
)

order_items_added_total = Counter(
    "ordercore_order_items_added_total",
    "Total number of line items attached to draft orders"
)

order_items_rejected_total = Counter(
    "ordercore_order_items_rejected_total",
    "Total number of rejected item attachments",
    ["kind"]  # kind: bad_request|not_found|conflict
)
