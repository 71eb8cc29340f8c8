# backend/shopcart/schemas/cart_schema.py
"""
Esquemas Pydantic para la gestión del carrito de la compra.
"""

from pydantic import BaseModel
from typing import List, Optional

class ShoppingItem(BaseModel):
    """
    Item que el llamador añade al carrito.

    No se validan rangos: precio o cantidad negativos y uuid vacío o nulo se aceptan tal cual.
    """
    uuid: Optional[str]
    price: float
    quantity: int
    name: Optional[str] = None

    @property
    def line_total(self) -> float:
        """Precio de la línea (precio unitario por cantidad)."""
        return self.price * self.quantity

class CartSummary(BaseModel):
    """Esquema que representa el estado completo del carrito."""
    items: List[ShoppingItem]
    item_count: int
    total_price: float
