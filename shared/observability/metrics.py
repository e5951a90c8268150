from prometheus_client import Counter, Histogram

# Business Metrics
ecomm_checkout_total = Counter(
    "ecomm_checkout_total",
    "Total checkouts processed",
    ["status"] # Labels: 'success', 'rejected', 'failed'
)

ecomm_checkout_duration_seconds = Histogram(
    "ecomm_checkout_duration_seconds",
    "Checkout duration in seconds"
)

ecomm_saga_compensation_total = Counter(
    "ecomm_saga_compensation_total",
    "Total saga compensations triggered",
    ["step_name", "outcome"] # outcome: 'ok', 'failed'
)

ecomm_stock_fallback_total = Counter(
    "ecomm_stock_fallback_total",
    "Stock decrements that bypassed the atomic backend procedure"
)

ecomm_order_status_updates_total = Counter(
    "ecomm_order_status_updates_total",
    "Order status changes issued by administrators",
    ["status"]
)
