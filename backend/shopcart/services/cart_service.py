# backend/shopcart/services/cart_service.py
"""
Servicio de Carrito de Compras para la aplicación.

Este módulo gestiona carritos de compra en memoria:
- ShoppingCart: un mapa uuid -> ShoppingItem con alta, baja, listado y total.
- CartService: un carrito por sesión, creado al añadir el primer item.

Ningún carrito es seguro para mutación concurrente; cada uno pertenece a una
única sesión y no se comparte entre ellas.
"""
import logging
from typing import Dict, Iterator, List, Optional

from shopcart.core.config import Settings
from shopcart.core.logging_config import setup_logging
from shopcart.schemas.cart_schema import CartSummary, ShoppingItem

logger = logging.getLogger(__name__)

class ShoppingCart:
    """
    Carrito de compras: como máximo una entrada por uuid.

    Añadir un item con un uuid ya presente reemplaza la entrada anterior
    (no se suman cantidades). Ninguna operación lanza excepciones.
    """

    def __init__(self):
        self._items: Dict[Optional[str], ShoppingItem] = {}

    def list_items(self) -> List[ShoppingItem]:
        """
        Devuelve todos los items del carrito en orden de inserción.
        """
        return list(self._items.values())

    def add_item(self, item: ShoppingItem) -> None:
        """
        Añade un item al carrito, o reemplaza el que tenga el mismo uuid.
        """
        if item.uuid in self._items:
            logger.debug("Reemplazando item %s en el carrito", item.uuid)
        else:
            logger.debug("Añadiendo item %s al carrito", item.uuid)
        self._items[item.uuid] = item

    def remove_item(self, uuid: Optional[str]) -> None:
        """
        Elimina un item del carrito. Si no existe, no hace nada.
        """
        if self._items.pop(uuid, None) is not None:
            logger.debug("Item %s eliminado del carrito", uuid)

    def get_total(self) -> float:
        """
        Calcula el precio total de todos los productos en el carrito.
        """
        total_price = 0.0
        for item in self._items.values():
            total_price += item.price * item.quantity
        return total_price

    def get_item(self, uuid: Optional[str]) -> Optional[ShoppingItem]:
        """Devuelve el item con ese uuid, o None si no está en el carrito."""
        return self._items.get(uuid)

    def clear(self) -> None:
        """
        Vacía completamente el carrito.
        """
        self._items.clear()
        logger.debug("Carrito vaciado")

    def summary(self) -> CartSummary:
        """Foto del carrito: items, número de entradas y total."""
        return CartSummary(
            items=self.list_items(),
            item_count=len(self._items),
            total_price=self.get_total(),
        )

    def __len__(self) -> int:
        """Número de entradas distintas."""
        return len(self._items)

    def __contains__(self, uuid: object) -> bool:
        """Indica si hay un item con ese uuid."""
        return uuid in self._items

    def __iter__(self) -> Iterator[ShoppingItem]:
        """Recorre los items en orden de inserción."""
        return iter(self.list_items())


class CartService:
    """
    Servicio para gestionar el carrito de compras de cada sesión en memoria.

    Solo las escrituras crean carritos; las lecturas de una sesión sin carrito
    devuelven valores vacíos sin registrarla.
    """
    def __init__(self, settings: Settings):
        self.settings = settings
        self._carts: Dict[str, ShoppingCart] = {}
        setup_logging(settings)

    def _get_cart_key(self, session_id) -> str:
        """Genera la clave para el carrito de una sesión."""
        return str(session_id)

    def _find_cart(self, session_id) -> Optional[ShoppingCart]:
        """Carrito existente de la sesión, sin crearlo."""
        return self._carts.get(self._get_cart_key(session_id))

    def get_cart(self, session_id) -> ShoppingCart:
        """
        Obtiene el carrito de una sesión, creándolo vacío si no existe.
        """
        cart_key = self._get_cart_key(session_id)
        cart = self._carts.get(cart_key)
        if cart is None:
            cart = ShoppingCart()
            self._carts[cart_key] = cart
            logger.info("Carrito creado para la sesión %s", cart_key)
        return cart

    def add_item(self, session_id, item: ShoppingItem) -> None:
        """Añade o reemplaza un item en el carrito de la sesión."""
        self.get_cart(session_id).add_item(item)

    def remove_item(self, session_id, uuid: Optional[str]) -> None:
        """Elimina un item del carrito de la sesión, si existe."""
        cart = self._find_cart(session_id)
        if cart is not None:
            cart.remove_item(uuid)

    def list_items(self, session_id) -> List[ShoppingItem]:
        """Items del carrito de la sesión; lista vacía si no tiene carrito."""
        cart = self._find_cart(session_id)
        return cart.list_items() if cart is not None else []

    def get_total(self, session_id) -> float:
        """Total del carrito de la sesión; 0 si no tiene carrito."""
        cart = self._find_cart(session_id)
        return cart.get_total() if cart is not None else 0.0

    def clear_cart(self, session_id) -> None:
        """
        Vacía completamente el carrito de una sesión.
        """
        cart = self._find_cart(session_id)
        if cart is not None:
            cart.clear()

    def get_cart_summary(self, session_id) -> CartSummary:
        """Resumen del carrito de la sesión; vacío si no tiene carrito."""
        cart = self._find_cart(session_id)
        if cart is None:
            return CartSummary(items=[], item_count=0, total_price=0.0)
        return cart.summary()

    def discard_cart(self, session_id) -> None:
        """
        Descarta el carrito de una sesión al terminar su ámbito.
        """
        cart_key = self._get_cart_key(session_id)
        if self._carts.pop(cart_key, None) is not None:
            logger.info("Carrito de la sesión %s descartado", cart_key)

    def session_ids(self) -> List[str]:
        """Claves de las sesiones con carrito."""
        return list(self._carts.keys())
