"""
Dashboard statistics - overview figures built from resource listings.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
import logging

from ims_dashboard.domain.resource import Resource
from ims_dashboard.errors import TransportFailure
from ims_dashboard.ports.resource_port import ResourcePort

logger = logging.getLogger(__name__)

RECENT_ORDER_LIMIT = 5


@dataclass
class DashboardStats:
    """Figures shown on the overview page."""
    product_count: int = 0
    customer_count: int = 0
    order_count: int = 0
    units_in_stock: int = 0
    recent_orders: List[Dict[str, Any]] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def cards(self) -> List[Dict[str, Any]]:
        """Statistic cards in display order."""
        return [
            {"title": "Total products", "value": self.product_count, "color": "#1890ff"},
            {"title": "Customers", "value": self.customer_count, "color": "#52c41a"},
            {"title": "Orders", "value": self.order_count, "color": "#fa8c16"},
            {"title": "Units in stock", "value": self.units_in_stock, "color": "#722ed1"},
        ]


def format_amount(amount: Any) -> str:
    """
    Format a money amount the way the backoffice shows it.

    Example: 1250000 -> "1.250.000 VNĐ"
    """
    try:
        value = int(round(float(amount)))
    except (TypeError, ValueError):
        return "-"
    return f"{value:,}".replace(",", ".") + " VNĐ"


def _customer_name(order: Dict[str, Any]) -> str:
    customer = order.get("customer")
    if isinstance(customer, dict) and customer.get("name"):
        return str(customer["name"])
    if order.get("customerName"):
        return str(order["customerName"])
    customer_id = order.get("customerId")
    return f"#{customer_id}" if customer_id is not None else "-"


def recent_orders(orders: List[Dict[str, Any]], limit: int = RECENT_ORDER_LIMIT) -> List[Dict[str, Any]]:
    """
    Latest orders first, as table rows.

    Orders without a date sort last.
    """
    ordered = sorted(orders, key=lambda o: str(o.get("orderDate") or ""), reverse=True)
    return [
        {
            "id": order.get("id"),
            "customer": _customer_name(order),
            "amount": format_amount(order.get("totalAmount")),
            "date": str(order.get("orderDate") or "-")[:10],
        }
        for order in ordered[:limit]
    ]


def collect_stats(resources: ResourcePort, token: str) -> DashboardStats:
    """
    Load the overview figures.

    A listing that fails is recorded in stats.errors and counted as empty;
    the rest of the overview still renders. Authentication failures are
    not caught here so the caller can end the session.

    Args:
        resources: Resource adapter
        token: Session token

    Returns:
        Collected statistics
    """
    stats = DashboardStats()
    listings: Dict[Resource, Optional[list]] = {}

    for resource in (Resource.PRODUCTS, Resource.CUSTOMERS, Resource.ORDERS):
        try:
            page = resources.list(resource, token)
        except TransportFailure as e:
            logger.warning(
                "Overview listing failed: %s", e.message,
                extra={"resource": resource.value, "error_code": e.code},
            )
            stats.errors.append(e.message)
            listings[resource] = None
            continue
        listings[resource] = page.items
        if resource == Resource.PRODUCTS:
            stats.product_count = page.total
        elif resource == Resource.CUSTOMERS:
            stats.customer_count = page.total
        else:
            stats.order_count = page.total

    products = listings.get(Resource.PRODUCTS) or []
    stats.units_in_stock = sum(
        int(p.get("quantityInStock") or 0) for p in products
        if isinstance(p.get("quantityInStock"), (int, float))
    )
    stats.recent_orders = recent_orders(listings.get(Resource.ORDERS) or [])
    return stats
