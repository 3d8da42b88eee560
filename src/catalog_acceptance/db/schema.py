"""
SQLite schema for the catalog fixture store
Products, variations, attributes, parent/child links and orders
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional

from ..core.config import AcceptanceConfig

logger = logging.getLogger(__name__)


def create_database(db_path: Optional[Path] = None) -> Path:
    """Create all database tables"""
    db_path = Path(db_path) if db_path else AcceptanceConfig.get_database_path()

    # Ensure data directory exists
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    # Products and variations share one table, variations carry parent_id
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            product_type TEXT NOT NULL,
            parent_id INTEGER,
            title TEXT NOT NULL DEFAULT '',
            price REAL,
            description TEXT,
            sync_enabled INTEGER,
            visible INTEGER,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (parent_id) REFERENCES products (id) ON DELETE CASCADE,
            CHECK (product_type IN ('simple', 'variable', 'variation'))
        )
    """)

    # Attributes owned by a variable product, position is the canonical order
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS product_attributes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            product_id INTEGER NOT NULL,
            position INTEGER NOT NULL,
            name TEXT NOT NULL,
            options TEXT NOT NULL,
            is_visible INTEGER DEFAULT 1,
            is_variation INTEGER DEFAULT 1,
            FOREIGN KEY (product_id) REFERENCES products (id) ON DELETE CASCADE,
            UNIQUE(product_id, name)
        )
    """)

    # One selected option per attribute per variation
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS variation_attributes (
            variation_id INTEGER NOT NULL,
            name TEXT NOT NULL,
            value TEXT NOT NULL,
            FOREIGN KEY (variation_id) REFERENCES products (id) ON DELETE CASCADE,
            PRIMARY KEY (variation_id, name)
        )
    """)

    # Parent -> child variation list
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS product_children (
            parent_id INTEGER NOT NULL,
            position INTEGER NOT NULL,
            child_id INTEGER NOT NULL,
            FOREIGN KEY (parent_id) REFERENCES products (id) ON DELETE CASCADE,
            FOREIGN KEY (child_id) REFERENCES products (id) ON DELETE CASCADE,
            PRIMARY KEY (parent_id, child_id)
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS orders (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            status TEXT DEFAULT 'pending',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)

    cursor.execute("CREATE INDEX IF NOT EXISTS idx_products_parent ON products(parent_id)")
    cursor.execute("CREATE INDEX IF NOT EXISTS idx_children_parent ON product_children(parent_id, position)")

    conn.commit()
    conn.close()

    logger.info(f"Catalog database ready at: {db_path}")
    return db_path


if __name__ == "__main__":
    create_database()
