#!/usr/bin/env python3
"""
Seed script
Creates the tables and loads demo vendors, products and sales
"""

import logging
import sys

from commission_manager.config.database import SessionLocal, init_db
from commission_manager.shared.database.seed import seed_demo_data

def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(name)s | %(levelname)s | %(message)s")

    init_db()
    db = SessionLocal()
    try:
        counts = seed_demo_data(db)
    finally:
        db.close()

    print(f"Vendors: {counts['vendors']}  Products: {counts['products']}  Sales: {counts['sales']}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
