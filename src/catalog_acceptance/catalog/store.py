"""
Catalog Store
Persist products, attributes, variations and orders for test fixtures
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..core.exceptions import InvalidStateError
from ..db import Database, create_database
from ..models import Attribute, Order, Product, VariableProduct, Variation

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Explicit handle on the catalog database.

    Every write is synchronous: ids are assigned on the first save and
    repeated saves of the same entity update the existing row.
    """

    def __init__(self, database: Database):
        self.db = database

    @classmethod
    def open(cls, db_path: Optional[Path] = None) -> "CatalogStore":
        """Create the schema if needed and return a store on it"""
        return cls(Database(create_database(db_path)))

    # =============== PRODUCTS ===============

    def save_product(self, product: Product) -> Product:
        """Insert or update a product row, assigning its id on first save"""
        if not product.is_persisted:
            product.id = self.db.execute_insert("""
                INSERT INTO products (
                    product_type, title, price, description, sync_enabled, visible
                ) VALUES (?, ?, ?, ?, ?, ?)
            """, (product.type, product.title, product.price, product.description,
                  int(product.sync_enabled), int(product.visible)))
            logger.info(f"Created {product.type} product #{product.id}: {product.title}")
        else:
            rows = self.db.execute_update("""
                UPDATE products
                SET product_type = ?, title = ?, price = ?, description = ?,
                    sync_enabled = ?, visible = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ? AND parent_id IS NULL
            """, (product.type, product.title, product.price, product.description,
                  int(product.sync_enabled), int(product.visible), product.id))
            if rows == 0:
                raise InvalidStateError(f"Product #{product.id} does not exist")
        return product

    def update_product_flags(self, product_id: int, sync_enabled: Optional[bool] = None,
                             visible: Optional[bool] = None) -> None:
        """Set sync and/or visibility flags on an existing product"""
        rows = 1
        if sync_enabled is not None:
            rows = self.db.execute_update(
                "UPDATE products SET sync_enabled = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (int(sync_enabled), product_id)
            )
        if rows and visible is not None:
            rows = self.db.execute_update(
                "UPDATE products SET visible = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (int(visible), product_id)
            )
        if rows == 0:
            raise InvalidStateError(f"Product #{product_id} does not exist")

    def get_product(self, product_id: int) -> Optional[Union[Product, VariableProduct]]:
        """Load a product with its attributes and children, None if missing"""
        row = self.db.fetch_one(
            "SELECT * FROM products WHERE id = ? AND parent_id IS NULL",
            (product_id,)
        )
        if not row:
            return None

        fields = dict(
            id=row['id'],
            title=row['title'],
            price=row['price'],
            description=row['description'] or "",
            type=row['product_type'],
            sync_enabled=bool(row['sync_enabled']),
            visible=bool(row['visible']),
        )
        if row['product_type'] == 'variable':
            return VariableProduct(
                attributes=self.get_attributes(product_id),
                children=self.get_children(product_id),
                **fields
            )
        return Product(**fields)

    # =============== ATTRIBUTES ===============

    def set_attributes(self, product: VariableProduct, attributes: Iterable[Attribute]) -> VariableProduct:
        """Replace the whole attribute list of a product, keeping the given order"""
        self._require_persisted(product)
        attributes = list(attributes)

        self.db.execute_replace(
            "DELETE FROM product_attributes WHERE product_id = ?",
            (product.id,),
            """
                INSERT INTO product_attributes (
                    product_id, position, name, options, is_visible, is_variation
                ) VALUES (?, ?, ?, ?, ?, ?)
            """,
            [
                (product.id, position, attribute.name, json.dumps(attribute.options),
                 int(attribute.visible), int(attribute.variation))
                for position, attribute in enumerate(attributes)
            ]
        )
        product.attributes = attributes
        return product

    def get_attributes(self, product_id: int) -> List[Attribute]:
        rows = self.db.execute_query("""
            SELECT * FROM product_attributes
            WHERE product_id = ?
            ORDER BY position
        """, (product_id,))
        return [
            Attribute(
                name=row['name'],
                options=json.loads(row['options']),
                visible=bool(row['is_visible']),
                variation=bool(row['is_variation']),
            )
            for row in rows
        ]

    # =============== VARIATIONS ===============

    def save_variation(self, variation: Variation) -> Variation:
        """Insert or update a variation and its attribute selections"""
        parent = self.db.fetch_one(
            "SELECT id, product_type FROM products WHERE id = ? AND parent_id IS NULL",
            (variation.parent_id,)
        )
        if not parent:
            raise InvalidStateError(
                f"Variation parent #{variation.parent_id} has not been persisted"
            )

        if not variation.is_persisted:
            variation.id = self.db.execute_insert(
                "INSERT INTO products (product_type, parent_id) VALUES ('variation', ?)",
                (variation.parent_id,)
            )
            logger.info(f"Created variation #{variation.id} of product #{variation.parent_id}")
        else:
            rows = self.db.execute_update("""
                UPDATE products SET parent_id = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ? AND product_type = 'variation'
            """, (variation.parent_id, variation.id))
            if rows == 0:
                raise InvalidStateError(f"Variation #{variation.id} does not exist")

        self.db.execute_replace(
            "DELETE FROM variation_attributes WHERE variation_id = ?",
            (variation.id,),
            "INSERT INTO variation_attributes (variation_id, name, value) VALUES (?, ?, ?)",
            [(variation.id, name, value) for name, value in variation.attributes.items()]
        )
        return variation

    def get_variation(self, variation_id: int) -> Optional[Variation]:
        row = self.db.fetch_one(
            "SELECT id, parent_id FROM products WHERE id = ? AND product_type = 'variation'",
            (variation_id,)
        )
        if not row:
            return None

        selections = self.db.execute_query(
            "SELECT name, value FROM variation_attributes WHERE variation_id = ? ORDER BY rowid",
            (variation_id,)
        )
        attributes: Dict[str, str] = {s['name']: s['value'] for s in selections}
        return Variation(id=row['id'], parent_id=row['parent_id'], attributes=attributes)

    # =============== CHILDREN ===============

    def set_children(self, product: VariableProduct, child_ids: Iterable[int]) -> VariableProduct:
        """Replace the child variation list of a product"""
        self._require_persisted(product)
        child_ids = list(child_ids)

        self.db.execute_replace(
            "DELETE FROM product_children WHERE parent_id = ?",
            (product.id,),
            "INSERT INTO product_children (parent_id, position, child_id) VALUES (?, ?, ?)",
            [(product.id, position, child_id) for position, child_id in enumerate(child_ids)]
        )
        product.children = child_ids
        return product

    def get_children(self, product_id: int) -> List[int]:
        rows = self.db.execute_query("""
            SELECT child_id FROM product_children
            WHERE parent_id = ?
            ORDER BY position
        """, (product_id,))
        return [row['child_id'] for row in rows]

    # =============== ORDERS ===============

    def save_order(self, order: Order) -> Order:
        if order.id is None:
            order.id = self.db.execute_insert(
                "INSERT INTO orders (status) VALUES (?)",
                (order.status,)
            )
            stored = self.get_order(order.id)
            order.created_at = stored.created_at
            logger.info(f"Created order #{order.id}")
        else:
            self.db.execute_update(
                "UPDATE orders SET status = ? WHERE id = ?",
                (order.status, order.id)
            )
        return order

    def get_order(self, order_id: int) -> Optional[Order]:
        row = self.db.fetch_one("SELECT * FROM orders WHERE id = ?", (order_id,))
        if not row:
            return None
        return Order(id=row['id'], status=row['status'], created_at=str(row['created_at']))

    @staticmethod
    def _require_persisted(product: Product):
        if not product.is_persisted:
            raise InvalidStateError(f"Product '{product.title}' has not been persisted")
