from datetime import datetime, timezone

SAMPLE_STOCK = [
    {
        "name": "Wireless Headphones",
        "sku": "WH-001",
        "category": "Electronics",
        "quantity": 45,
        "min_stock": 10,
        "max_stock": 100,
        "unit_price": 99.99,
        "supplier": "TechCorp",
        "last_updated": datetime(2024, 1, 15, tzinfo=timezone.utc),
    },
    {
        "name": "Office Chair",
        "sku": "OC-002",
        "category": "Furniture",
        "quantity": 8,
        "min_stock": 15,
        "max_stock": 50,
        "unit_price": 249.99,
        "supplier": "FurniSupply",
        "last_updated": datetime(2024, 1, 14, tzinfo=timezone.utc),
    },
    {
        "name": "Laptop Stand",
        "sku": "LS-003",
        "category": "Accessories",
        "quantity": 23,
        "min_stock": 20,
        "max_stock": 80,
        "unit_price": 39.99,
        "supplier": "AccessoryHub",
        "last_updated": datetime(2024, 1, 16, tzinfo=timezone.utc),
    },
    {
        "name": "Bluetooth Speaker",
        "sku": "BS-004",
        "category": "Electronics",
        "quantity": 5,
        "min_stock": 12,
        "max_stock": 60,
        "unit_price": 79.99,
        "supplier": "AudioTech",
        "last_updated": datetime(2024, 1, 13, tzinfo=timezone.utc),
    },
]

# Categories offered by the add-stock form; stored categories are free text
FORM_CATEGORIES = ["Electronics", "Furniture", "Accessories", "Office Supplies", "Tools", "Other"]
