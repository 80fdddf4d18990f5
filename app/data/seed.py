# app/data/seed.py
from app.data.database import init_storage
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {
        "title": "Mechanical Keyboard",
        "description": "87-key board with brown switches",
        "code": "KB-001",
        "price": 199.99,
        "stock": 12,
        "category": "peripherals",
        "thumbnails": ["/img/kb-001.png"],
    },
    {
        "title": "Wireless Mouse",
        "description": "Ergonomic 2.4GHz mouse",
        "code": "MS-002",
        "price": 49.5,
        "stock": 30,
        "category": "peripherals",
    },
    {
        "title": "27in Monitor",
        "description": "IPS panel, 1440p",
        "code": "MN-003",
        "price": 899,
        "stock": 4,
        "category": "displays",
    },
]


def seed(data_dir=None) -> int:
    """Insert the demo catalogue when products.json is empty. Returns how many were added."""
    repo = ProductRepo(init_storage(data_dir).products)
    # not forcing: only seed if empty
    if repo.list_products():
        logger.info("Products already present, skipping seed")
        return 0

    for data in DEMO_PRODUCTS:
        repo.create_product(data)
    logger.info(f"Seeded {len(DEMO_PRODUCTS)} products")
    return len(DEMO_PRODUCTS)


if __name__ == "__main__":
    seed()
