import math
from collections import Counter
from datetime import datetime, timezone
from typing import Optional, Sequence

from app.models.metrics import Driver, MetricsSnapshot, Shipment, TopRoute


def _mean(total: float, count: int) -> float:
    # An empty catalog has no average: NaN, not 0
    return total / count if count else math.nan


def _top_routes(shipments: Sequence[Shipment]) -> list[TopRoute]:
    """Every shipment as a route, highest rate first.

    sorted() is stable, so equal rates keep catalog order.
    """
    routes = [
        TopRoute(
            route=f"{s.origin} → {s.destination}",
            rate=s.loadboard_rate,
            load_id=s.load_id,
        )
        for s in shipments
    ]
    return sorted(routes, key=lambda r: r.rate, reverse=True)


def compute_snapshot(
    shipments: Sequence[Shipment],
    drivers: Optional[Sequence[Driver]] = None,
    now: Optional[datetime] = None,
) -> MetricsSnapshot:
    """Summarize the shipment catalog and driver roster.

    Pure: the result depends only on the arguments (and `now`, which only
    feeds the timestamp).
    """
    drivers = drivers or []
    now = now or datetime.now(timezone.utc)

    total_loads = len(shipments)
    total_revenue = sum(s.loadboard_rate for s in shipments)
    total_weight = sum(s.weight for s in shipments)
    total_miles = sum(s.miles for s in shipments)

    return MetricsSnapshot(
        total_loads=total_loads,
        total_revenue=total_revenue,
        average_rate=_mean(total_revenue, total_loads),
        average_weight=_mean(total_weight, total_loads),
        total_miles=total_miles,
        average_miles=_mean(total_miles, total_loads),
        equipment_breakdown=dict(Counter(s.equipment_type for s in shipments)),
        commodity_breakdown=dict(Counter(s.commodity_type for s in shipments)),
        top_routes=_top_routes(shipments),
        active_drivers=sum(1 for d in drivers if d.status == "active"),
        total_drivers=len(drivers),
        timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )
