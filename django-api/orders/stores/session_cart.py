"""Cart repository backed by the Django session of the current shopper."""

from django.contrib.sessions.backends.base import SessionBase

from orders.domain import Cart
from orders.stores.interfaces import CartRepository

CART_SESSION_KEY = "cart"


class SessionCartRepository(CartRepository):
    """Stores the cart as a plain dict under one session key."""

    def __init__(self, session: SessionBase) -> None:
        self._session = session

    def load(self) -> Cart:
        return Cart.from_dict(self._session.get(CART_SESSION_KEY))

    def save(self, cart: Cart) -> None:
        if cart.is_empty():
            self._session.pop(CART_SESSION_KEY, None)
        else:
            self._session[CART_SESSION_KEY] = cart.to_dict()
        self._session.modified = True
