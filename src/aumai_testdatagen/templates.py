"""Pre-built record templates for data generation.

Each entry has the same shape as a template JSON file on disk: a ``schema``
plus optional ``constraints``, ``enums`` and ``data`` sections.  Nested
fields look up their constraints, enums and data pools by their own local
name, so ``address.city`` and ``shippingAddress.city`` share the ``city``
pool.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Shared pools
# ---------------------------------------------------------------------------

_ADDRESS_SCHEMA: dict[str, object] = {
    "street": "string",
    "city": "string",
    "state": "string",
    "zipCode": "string",
    "country": "string",
}

_ADDRESS_DATA: dict[str, list[object]] = {
    "street": ["123 Main St", "456 Oak Ave", "789 Pine Rd", "321 Elm St", "654 Cedar Ln"],
    "city": ["New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia"],
    "state": ["California", "Texas", "Florida", "New York", "Pennsylvania", "Illinois"],
    "zipCode": ["10001", "90001", "60601", "77001", "85001", "19101"],
    "country": ["United States", "Canada", "United Kingdom", "Australia", "Germany"],
}

# ---------------------------------------------------------------------------
# Record templates
# ---------------------------------------------------------------------------

USER_TEMPLATE: dict[str, object] = {
    "schema": {
        "id": "number",
        "firstName": "string",
        "lastName": "string",
        "email": "email",
        "phone": "phone",
        "dateOfBirth": "date",
        "address": _ADDRESS_SCHEMA,
        "profile": {
            "bio": "text",
            "avatar": "url",
            "website": "url",
        },
        "preferences": {
            "theme": "enum",
            "language": "enum",
            "notifications": "boolean",
            "newsletter": "boolean",
        },
        "role": "enum",
        "status": "enum",
        "interests": ["string"],
        "createdAt": "datetime",
        "updatedAt": "datetime",
    },
    "constraints": {
        "id": {"min": 1, "max": 999999},
        "firstName": {"minLength": 2, "maxLength": 50},
        "lastName": {"minLength": 2, "maxLength": 50},
        "phone": {"format": "us"},
        "dateOfBirth": {"minAge": 18, "maxAge": 100},
        "bio": {"minLength": 50, "maxLength": 200},
    },
    "enums": {
        "theme": ["light", "dark", "auto"],
        "language": ["en", "es", "fr", "de", "it"],
        "role": ["admin", "user", "moderator", "guest"],
        "status": ["active", "inactive", "pending", "suspended"],
    },
    "data": {
        "firstName": ["John", "Jane", "Michael", "Sarah", "David", "Emily", "Robert", "Jessica"],
        "lastName": ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis"],
        "interests": ["technology", "travel", "music", "sports", "cooking", "reading", "gaming"],
        **_ADDRESS_DATA,
    },
}

PRODUCT_TEMPLATE: dict[str, object] = {
    "schema": {
        "id": "number",
        "name": "string",
        "description": "text",
        "price": "number",
        "currency": "enum",
        "category": "enum",
        "brand": "string",
        "sku": "string",
        "inStock": "boolean",
        "quantity": "number",
        "weight": "number",
        "dimensions": {
            "length": "number",
            "width": "number",
            "height": "number",
            "unit": "enum",
        },
        "images": ["url"],
        "tags": ["string"],
        "rating": "number",
        "reviews": "number",
        "availability": "enum",
        "createdAt": "datetime",
        "updatedAt": "datetime",
    },
    "constraints": {
        "id": {"min": 1, "max": 999999},
        "price": {"min": 0.01, "max": 10000, "decimal": 2},
        "sku": {"minLength": 8, "maxLength": 12},
        "quantity": {"min": 0, "max": 1000},
        "weight": {"min": 0.1, "max": 50, "decimal": 2},
        "length": {"min": 1, "max": 100},
        "width": {"min": 1, "max": 100},
        "height": {"min": 1, "max": 100},
        "rating": {"min": 1, "max": 5, "decimal": 1},
        "reviews": {"min": 0, "max": 10000},
        "description": {"minLength": 50, "maxLength": 300},
    },
    "enums": {
        "currency": ["USD", "EUR", "GBP", "CAD", "AUD"],
        "category": [
            "Electronics", "Clothing", "Books", "Home & Garden", "Sports",
            "Beauty", "Toys", "Automotive", "Health", "Food",
        ],
        "unit": ["inches", "cm"],
        "availability": ["in-stock", "out-of-stock", "pre-order", "discontinued"],
    },
    "data": {
        "name": [
            "Wireless Bluetooth Headphones", "Smart Fitness Tracker", "Organic Cotton T-Shirt",
            "Professional Camera Lens", "Ergonomic Office Chair", "Stainless Steel Water Bottle",
            "LED Desk Lamp", "Wireless Charging Pad", "Bluetooth Speaker",
            "Gaming Mechanical Keyboard",
        ],
        "brand": ["Apple", "Samsung", "Sony", "Bose", "JBL", "Logitech", "Razer", "Corsair"],
        "tags": [
            "wireless", "bluetooth", "portable", "smart", "fitness", "organic",
            "sustainable", "professional", "durable",
        ],
    },
}

ORDER_TEMPLATE: dict[str, object] = {
    "schema": {
        "id": "string",
        "customerId": "number",
        "items": [
            {
                "productId": "number",
                "quantity": "number",
                "price": "number",
            }
        ],
        "total": "number",
        "currency": "enum",
        "status": "enum",
        "paymentMethod": "enum",
        "paymentStatus": "enum",
        "shippingAddress": _ADDRESS_SCHEMA,
        "billingAddress": _ADDRESS_SCHEMA,
        "shippingMethod": "enum",
        "shippingCost": "number",
        "tax": "number",
        "discount": "number",
        "notes": "text",
        "estimatedDelivery": "date",
        "createdAt": "datetime",
        "updatedAt": "datetime",
    },
    "constraints": {
        "id": {"minLength": 8, "maxLength": 8},
        "customerId": {"min": 1, "max": 999999},
        "productId": {"min": 1, "max": 999999},
        "quantity": {"min": 1, "max": 4},
        "price": {"min": 10, "max": 110, "decimal": 2},
        "total": {"min": 0.01, "max": 50000, "decimal": 2},
        "shippingCost": {"min": 0, "max": 20, "decimal": 2},
        "tax": {"min": 0, "max": 500, "decimal": 2},
        "discount": {"min": 0, "max": 20, "decimal": 2},
        "estimatedDelivery": {"minAge": 0, "maxAge": 0},
    },
    "enums": {
        "currency": ["USD"],
        "status": [
            "pending", "confirmed", "processing", "shipped", "delivered", "cancelled", "refunded",
        ],
        "paymentMethod": [
            "credit_card", "debit_card", "paypal", "apple_pay", "google_pay", "bank_transfer", "cash",
        ],
        "paymentStatus": ["pending", "paid", "failed", "refunded", "partially_refunded", "cancelled"],
        "shippingMethod": ["standard", "express", "overnight", "pickup", "international", "free"],
    },
    "data": {
        "notes": [
            "Please leave package at front door if no answer",
            "Deliver to back entrance",
            "Call before delivery",
            "Fragile - handle with care",
        ],
        **_ADDRESS_DATA,
    },
}

BUILTIN_TEMPLATES: dict[str, dict[str, object]] = {
    "user": USER_TEMPLATE,
    "product": PRODUCT_TEMPLATE,
    "order": ORDER_TEMPLATE,
}

__all__ = ["BUILTIN_TEMPLATES", "ORDER_TEMPLATE", "PRODUCT_TEMPLATE", "USER_TEMPLATE"]
