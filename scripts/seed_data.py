import argparse

from sqlalchemy import delete, select

from bizhub.core.logging import setup_logging
from bizhub.database import Base, SessionLocal, engine
from bizhub.models import Customer, Inventory, Notification, Product, Task, import_all_models
from bizhub.services import (
    create_customer,
    create_inventory,
    create_product,
    create_task,
    update_task,
)


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample business data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    import_all_models()
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if args.reset:
            for model in (Notification, Inventory, Product, Task, Customer):
                db.execute(delete(model))
            db.commit()

        has_product = db.execute(select(Product.id).limit(1)).first()
        if has_product:
            print("Seed skipped: products already exist.")
            return

        # Seeded through the services so the notification rules fire as usual.
        desk = create_product(
            db,
            {
                "name": "Standing Desk",
                "description": "Height adjustable, oak top",
                "price": "549.00",
                "sku": "DESK-001",
                "category": "furniture",
            },
        )
        chair = create_product(
            db,
            {
                "name": "Ergonomic Chair",
                "price": "289.50",
                "sku": "CHAIR-014",
                "category": "furniture",
            },
        )
        create_product(
            db,
            {"name": "USB-C Dock", "price": "129.99", "sku": "DOCK-220", "category": "electronics"},
        )

        create_inventory(
            db,
            {"product_id": desk.id, "quantity": 4, "min_stock_level": 10, "max_stock_level": 50, "location": "Warehouse A"},
        )
        create_inventory(
            db,
            {"product_id": chair.id, "quantity": 40, "min_stock_level": 15, "max_stock_level": 80, "location": "Warehouse B"},
        )

        create_task(db, {"title": "Reorder standing desks", "priority": "urgent"})
        audit = create_task(db, {"title": "Quarterly stock audit", "priority": "medium"})
        update_task(db, {"id": audit.id, "status": "completed"})

        create_customer(
            db,
            {"name": "Ada Lovelace", "email": "ada@analytical.example", "company": "Analytical Engines"},
        )
        create_customer(
            db,
            {"name": "Grace Hopper", "email": "grace@cobol.example", "status": "pending"},
        )

        print("Seed complete.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
