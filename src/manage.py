"""Storefront database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load sample categories and products
"""

import argparse
import sys

SAMPLE_CATEGORIES = [
    {"name": "Electronics", "slug": "electronics", "description": "Electronic devices and gadgets"},
    {"name": "Clothing", "slug": "clothing", "description": "Fashion and apparel"},
    {"name": "Books", "slug": "books", "description": "Books and literature"},
    {"name": "Home & Garden", "slug": "home-garden", "description": "Home improvement and gardening"},
    {"name": "Sports", "slug": "sports", "description": "Sports and fitness equipment"},
]

SAMPLE_PRODUCTS = [
    {
        "name": "Premium Wireless Headphones",
        "description": "High-quality wireless headphones with noise cancellation",
        "price": 79.99,
        "original_price": 99.99,
        "category": "electronics",
        "brand": "AudioTech",
        "rating": 4.5,
        "review_count": 127,
        "stock": 50,
        "featured": True,
    },
    {
        "name": "Latest Smartphone Pro",
        "description": "Latest flagship smartphone with advanced features",
        "price": 799.99,
        "category": "electronics",
        "brand": "TechCorp",
        "rating": 4.2,
        "review_count": 89,
        "stock": 30,
        "featured": True,
    },
    {
        "name": "Ultra-thin Laptop",
        "description": "Lightweight laptop perfect for productivity",
        "price": 1299.99,
        "category": "electronics",
        "brand": "CompuTech",
        "rating": 4.8,
        "review_count": 203,
        "stock": 25,
        "featured": True,
    },
    {
        "name": "Smart Fitness Watch",
        "description": "Advanced fitness tracking with health monitoring",
        "price": 299.99,
        "category": "sports",
        "brand": "FitTech",
        "rating": 4.3,
        "review_count": 56,
        "stock": 40,
        "featured": True,
    },
    {
        "name": "Classic Denim Jacket",
        "description": "Timeless denim jacket with a relaxed fit",
        "price": 59.99,
        "category": "clothing",
        "brand": "UrbanThreads",
        "rating": 4.4,
        "review_count": 64,
        "stock": 80,
    },
    {
        "name": "The Pragmatic Gardener",
        "description": "A practical guide to growing vegetables in small spaces",
        "price": 24.99,
        "category": "books",
        "brand": "GreenLeaf Press",
        "rating": 4.6,
        "review_count": 38,
        "stock": 120,
    },
    {
        "name": "Bluetooth Speaker",
        "description": "Portable wireless speaker with premium sound quality",
        "price": 89.99,
        "category": "electronics",
        "brand": "SoundWave",
        "rating": 4.6,
        "review_count": 234,
        "stock": 60,
        "featured": True,
    },
    {
        "name": "Cedar Raised Garden Bed",
        "description": "Untreated cedar planter box for patios and yards",
        "price": 149.99,
        "category": "home-garden",
        "brand": "BackyardCo",
        "rating": 4.1,
        "review_count": 91,
        "stock": 20,
    },
]


def setup_databases():
    """Create database schemas for the storefront domain."""
    from storefront.bootstrap import init_storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront = init_storefront()
    print("Creating storefront database schema...")
    setup_db(storefront)
    print("Done.")


def drop_databases():
    """Drop database schemas for the storefront domain."""
    from storefront.bootstrap import init_storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront = init_storefront()
    print("Dropping storefront database schema...")
    drop_db(storefront)
    print("Done.")


def seed(domain=None):
    """Load sample categories and products unless categories already exist.

    Returns the number of products created.
    """
    from storefront.catalogue.category.category import Category
    from storefront.catalogue.category.management import CreateCategory
    from storefront.catalogue.product.creation import CreateProduct

    if domain is None:
        from storefront.bootstrap import init_storefront

        domain = init_storefront()

    with domain.domain_context():
        if domain.repository_for(Category)._dao.query.all().items:
            print("Database already seeded, skipping...")
            return 0

        category_ids = {}
        for category in SAMPLE_CATEGORIES:
            category_ids[category["slug"]] = domain.process(CreateCategory(**category), asynchronous=False)
        print(f"Inserted {len(category_ids)} categories")

        for product in SAMPLE_PRODUCTS:
            data = {key: value for key, value in product.items() if key != "category"}
            domain.process(
                CreateProduct(category_id=category_ids[product["category"]], **data),
                asynchronous=False,
            )
        print(f"Inserted {len(SAMPLE_PRODUCTS)} products")

    return len(SAMPLE_PRODUCTS)


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load sample categories and products")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    elif args.command == "seed":
        seed()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
