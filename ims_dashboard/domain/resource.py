"""
Resource Domain Model - The inventory resources the dashboard navigates.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Tuple
from enum import Enum


class Resource(Enum):
    """CRUD resources exposed by the inventory API."""
    PRODUCTS = "products"
    CUSTOMERS = "customers"
    SUPPLIERS = "suppliers"
    ORDERS = "orders"
    STOCK = "stock"
    ADMINISTRATORS = "administrators"

    @property
    def api_path(self) -> str:
        return _API_PATHS[self]

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def columns(self) -> List[Tuple[str, str]]:
        """(field, heading) pairs shown in the resource table."""
        return _COLUMNS[self]

    @classmethod
    def from_slug(cls, slug: str) -> Optional["Resource"]:
        try:
            return cls(slug)
        except ValueError:
            return None


_API_PATHS = {
    Resource.PRODUCTS: "/api/v1/products",
    Resource.CUSTOMERS: "/api/v1/customers",
    Resource.SUPPLIERS: "/api/v1/suppliers",
    Resource.ORDERS: "/api/v1/orders",
    Resource.STOCK: "/api/v1/stock-entries",
    Resource.ADMINISTRATORS: "/api/v1/administrators",
}

_TITLES = {
    Resource.PRODUCTS: "Products",
    Resource.CUSTOMERS: "Customers",
    Resource.SUPPLIERS: "Suppliers",
    Resource.ORDERS: "Orders",
    Resource.STOCK: "Stock",
    Resource.ADMINISTRATORS: "Administrators",
}

_COLUMNS = {
    Resource.PRODUCTS: [
        ("id", "ID"),
        ("name", "Name"),
        ("price", "Price"),
        ("quantityInStock", "In stock"),
    ],
    Resource.CUSTOMERS: [
        ("id", "ID"),
        ("name", "Name"),
        ("contactInfo", "Contact"),
    ],
    Resource.SUPPLIERS: [
        ("id", "ID"),
        ("name", "Name"),
        ("contactInfo", "Contact"),
    ],
    Resource.ORDERS: [
        ("id", "ID"),
        ("customerId", "Customer"),
        ("orderDate", "Date"),
        ("totalAmount", "Amount"),
    ],
    Resource.STOCK: [
        ("id", "ID"),
        ("productId", "Product"),
        ("supplierId", "Supplier"),
        ("quantity", "Quantity"),
        ("entryType", "Type"),
        ("entryDate", "Date"),
    ],
    Resource.ADMINISTRATORS: [
        ("id", "ID"),
        ("username", "Username"),
        ("email", "Email"),
        ("fullName", "Full name"),
    ],
}


@dataclass
class Page:
    """
    One listing from the API.

    The backend answers either with a bare JSON array or with a paged
    envelope ({"items": [...], "totalElements": n}; older endpoints use
    "content").
    """
    items: List[Dict[str, Any]] = field(default_factory=list)
    total: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "Page":
        """
        Raises:
            ValueError: If data is neither a list nor a paged envelope
        """
        if isinstance(data, list):
            items = [item for item in data if isinstance(item, dict)]
            return cls(items=items, total=len(items))

        if isinstance(data, dict):
            raw_items = data.get("items")
            if raw_items is None:
                raw_items = data.get("content")
            if isinstance(raw_items, list):
                items = [item for item in raw_items if isinstance(item, dict)]
                total = data.get("totalElements")
                return cls(items=items, total=int(total) if isinstance(total, int) else len(items))

        raise ValueError("unexpected listing payload")
