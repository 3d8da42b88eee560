from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional

ProductType = Literal["simple", "variable"]


class Product(BaseModel):
    """Catalog product, id is None until persisted"""
    id: Optional[int] = None
    title: str = ""
    price: float = 0.0
    description: str = ""
    type: ProductType = "simple"
    sync_enabled: bool = True
    visible: bool = True

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


class Attribute(BaseModel):
    """Product attribute with its ordered options"""
    name: str
    options: List[str] = Field(default_factory=list)
    visible: bool = False
    variation: bool = False  # used for variations


class Variation(BaseModel):
    """One purchasable combination of attribute selections under a variable product"""
    id: Optional[int] = None
    parent_id: int
    attributes: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


class VariableProduct(Product):
    """Product that owns its attributes and lists its child variation ids"""
    type: ProductType = "variable"
    attributes: List[Attribute] = Field(default_factory=list)
    children: List[int] = Field(default_factory=list)


class Order(BaseModel):
    """Empty order used as a fixture"""
    id: Optional[int] = None
    status: str = "pending"
    created_at: Optional[str] = None


class VariableProductFixture(BaseModel):
    """Result of building a variable product: the parent and its variations by label"""
    product: VariableProduct
    variations: Dict[str, Variation] = Field(default_factory=dict)
