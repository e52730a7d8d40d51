"""
Client state store.

Holds the session-scoped user, cart, wishlist and search history. The in-memory
state is authoritative; an optional persistence backend (anything with
``load() -> dict | None`` and ``save(dict)``) is read once by ``hydrate()`` and
written through after every mutation.
"""
import logging
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Callable, List, Optional
from uuid import uuid4

from schemas import CartItem, CartSummary, Product, StoreSnapshot, User, WishlistItem

logger = logging.getLogger(__name__)

SEARCH_HISTORY_LIMIT = 10
FREE_DELIVERY_THRESHOLD = 50000
DELIVERY_FEE = 3000
MAX_SESSIONS = 1000


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def guest_user() -> User:
    return User(id="guest-1", name="Guest 1", email="guest1@example.com", is_guest=True)


class StateStore:
    def __init__(self, persistence=None):
        self.persistence = persistence
        self.user: Optional[User] = None
        self.cart_items: List[CartItem] = []
        self.wishlist_items: List[WishlistItem] = []
        self.search_history: List[str] = []

    # ---------------------------
    # Persistence
    # ---------------------------
    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            user=self.user,
            cart_items=self.cart_items,
            wishlist_items=self.wishlist_items,
            search_history=self.search_history,
        )

    def hydrate(self) -> None:
        if self.persistence is None:
            return
        try:
            data = self.persistence.load()
            if data:
                snap = StoreSnapshot.model_validate(data)
                self.user = snap.user
                self.cart_items = snap.cart_items
                self.wishlist_items = snap.wishlist_items
                self.search_history = snap.search_history[:SEARCH_HISTORY_LIMIT]
        except Exception:
            logger.warning("Could not restore store snapshot, starting empty", exc_info=True)

    def _persist(self) -> None:
        if self.persistence is None:
            return
        try:
            self.persistence.save(self.snapshot().model_dump(mode="json", by_alias=True))
        except Exception:
            # in-memory state stays as mutated
            logger.warning("Could not persist store snapshot", exc_info=True)

    # ---------------------------
    # User
    # ---------------------------
    def set_user(self, user: User) -> None:
        self.user = user
        self._persist()

    def logout(self) -> None:
        self.user = None
        self.cart_items = []
        self.wishlist_items = []
        self._persist()

    # ---------------------------
    # Cart
    # ---------------------------
    def find_cart_item(self, item_id: str) -> Optional[CartItem]:
        return next((i for i in self.cart_items if i.id == item_id), None)

    def find_cart_line(self, product_id: int, color: str, size: str) -> Optional[CartItem]:
        return next(
            (i for i in self.cart_items if i.product.id == product_id and i.color == color and i.size == size),
            None,
        )

    def quantity_in_cart(self, product_id: int) -> int:
        """Units of a product across all of its cart lines."""
        return sum(i.quantity for i in self.cart_items if i.product.id == product_id)

    def add_to_cart(self, product: Product, color: str, size: str, quantity: int = 1) -> CartItem:
        """Add a line, or grow the existing line for the same product/color/size."""
        item = self.find_cart_line(product.id, color, size)
        if item is not None:
            item.quantity += quantity
        else:
            item = CartItem(
                id=f"cart-{uuid4().hex}",
                product=product,
                color=color,
                size=size,
                quantity=quantity,
                added_at=_now(),
            )
            self.cart_items.append(item)
        self._persist()
        return item

    def remove_from_cart(self, item_id: str) -> None:
        self.cart_items = [i for i in self.cart_items if i.id != item_id]
        self._persist()

    def update_cart_quantity(self, item_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove_from_cart(item_id)
            return
        item = self.find_cart_item(item_id)
        if item is None:
            return
        item.quantity = quantity
        self._persist()

    def clear_cart(self) -> None:
        self.cart_items = []
        self._persist()

    def get_cart_total(self) -> int:
        return sum(i.product.price * i.quantity for i in self.cart_items)

    def get_cart_count(self) -> int:
        return sum(i.quantity for i in self.cart_items)

    def cart_summary(self) -> CartSummary:
        total = self.get_cart_total()
        original = sum((i.product.original_price or i.product.price) * i.quantity for i in self.cart_items)
        fee = 0 if not self.cart_items or total >= FREE_DELIVERY_THRESHOLD else DELIVERY_FEE
        return CartSummary(
            total=total,
            original_total=original,
            discount_total=original - total,
            delivery_fee=fee,
            final_total=total + fee,
            count=self.get_cart_count(),
        )

    # ---------------------------
    # Wishlist
    # ---------------------------
    def add_to_wishlist(self, product: Product) -> None:
        if self.is_in_wishlist(product.id):
            return
        self.wishlist_items.append(WishlistItem(id=f"wishlist-{uuid4().hex}", product=product, added_at=_now()))
        self._persist()

    def remove_from_wishlist(self, product_id: int) -> None:
        self.wishlist_items = [i for i in self.wishlist_items if i.product.id != product_id]
        self._persist()

    def is_in_wishlist(self, product_id: int) -> bool:
        return any(i.product.id == product_id for i in self.wishlist_items)

    def toggle_wishlist(self, product: Product) -> bool:
        if self.is_in_wishlist(product.id):
            self.remove_from_wishlist(product.id)
            return False
        self.add_to_wishlist(product)
        return True

    # ---------------------------
    # Search history
    # ---------------------------
    def add_to_search_history(self, query: str) -> None:
        history = [q for q in self.search_history if q != query]
        self.search_history = [query, *history][:SEARCH_HISTORY_LIMIT]
        self._persist()

    def clear_search_history(self) -> None:
        self.search_history = []
        self._persist()


class StoreRegistry:
    """Stores per client session, least recently used first out.

    At most ``max_sessions`` stores stay in memory. An evicted session is
    rebuilt from its persisted snapshot the next time it is used; without a
    persistence backend its state is gone.
    """

    def __init__(
        self,
        persistence_factory: Optional[Callable[[str], object]] = None,
        max_sessions: int = MAX_SESSIONS,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be positive")
        self._persistence_factory = persistence_factory
        self.max_sessions = max_sessions
        self._stores: "OrderedDict[str, StateStore]" = OrderedDict()

    def _build(self, session_id: str) -> StateStore:
        persistence = self._persistence_factory(session_id) if self._persistence_factory else None
        store = StateStore(persistence)
        store.hydrate()
        return store

    def get(self, session_id: str) -> StateStore:
        store = self._stores.get(session_id)
        if store is not None:
            self._stores.move_to_end(session_id)
            return store
        store = self._build(session_id)
        self._stores[session_id] = store
        logger.info("session %s opened", session_id)
        while len(self._stores) > self.max_sessions:
            evicted, _ = self._stores.popitem(last=False)
            logger.info("session %s evicted", evicted)
        return store

    def view(self, session_id: str) -> StateStore:
        """Store for reading only; an unknown session is not kept in memory."""
        store = self._stores.get(session_id)
        if store is not None:
            return store
        return self._build(session_id)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._stores

    def __len__(self) -> int:
        return len(self._stores)
