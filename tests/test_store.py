import logging

import pytest

from conftest import BrokenSnapshots, MemorySnapshots
from catalog import find_product
from store import SEARCH_HISTORY_LIMIT, StateStore, StoreRegistry, guest_user


def test_same_combination_merges_into_one_line(store, products):
    hoodie = find_product(products, 1)
    first = store.add_to_cart(hoodie, "Black", "M", 2)
    second = store.add_to_cart(hoodie, "Black", "M", 3)

    assert len(store.cart_items) == 1
    assert first.id == second.id
    assert store.cart_items[0].quantity == 5


def test_different_color_or_size_is_a_new_line(store, products):
    hoodie = find_product(products, 1)
    store.add_to_cart(hoodie, "Black", "M", 1)
    store.add_to_cart(hoodie, "Black", "L", 1)
    store.add_to_cart(hoodie, "White", "M", 1)

    assert len(store.cart_items) == 3
    assert len({i.id for i in store.cart_items}) == 3


def test_add_does_not_enforce_stock(store, products):
    coat = find_product(products, 9)
    store.add_to_cart(coat, "Beige", "M", coat.stock)
    store.add_to_cart(coat, "Beige", "M", 10)
    assert store.cart_items[0].quantity == coat.stock + 10


def test_update_quantity_sets_absolute_value(store, products):
    item = store.add_to_cart(find_product(products, 2), "White", "S", 4)
    store.update_cart_quantity(item.id, 2)
    assert store.cart_items[0].quantity == 2


def test_update_quantity_to_zero_or_less_removes(store, products):
    a = store.add_to_cart(find_product(products, 2), "White", "S", 1)
    b = store.add_to_cart(find_product(products, 3), "Blue", "M", 1)

    store.update_cart_quantity(a.id, 0)
    assert [i.id for i in store.cart_items] == [b.id]

    store.update_cart_quantity(b.id, -3)
    assert store.cart_items == []


def test_unknown_item_ids_are_noops(store, products):
    store.add_to_cart(find_product(products, 2), "White", "S", 1)
    store.update_cart_quantity("cart-missing", 7)
    store.remove_from_cart("cart-missing")
    assert store.get_cart_count() == 1


def test_cart_total_and_count(store, products):
    store.add_to_cart(find_product(products, 2), "White", "S", 2)
    store.add_to_cart(find_product(products, 1), "Black", "M", 1)

    assert store.get_cart_total() == 19900 * 2 + 39000
    assert store.get_cart_count() == 3

    store.clear_cart()
    assert store.get_cart_total() == 0
    assert store.get_cart_count() == 0


def test_cart_summary(store, products):
    summary = store.cart_summary()
    assert summary.total == 0
    assert summary.delivery_fee == 0

    store.add_to_cart(find_product(products, 2), "White", "S", 2)
    summary = store.cart_summary()
    assert summary.total == 39800
    assert summary.discount_total == 0
    assert summary.delivery_fee == 3000
    assert summary.final_total == 42800

    store.add_to_cart(find_product(products, 1), "Black", "M", 1)
    summary = store.cart_summary()
    assert summary.total == 78800
    assert summary.original_total == 88800
    assert summary.discount_total == 10000
    assert summary.delivery_fee == 0
    assert summary.final_total == 78800
    assert summary.count == 3


def test_wishlist_round_trip(store, products):
    tote = find_product(products, 15)
    assert not store.is_in_wishlist(tote.id)

    store.add_to_wishlist(tote)
    assert store.is_in_wishlist(tote.id)
    store.add_to_wishlist(tote)
    assert len(store.wishlist_items) == 1

    store.remove_from_wishlist(tote.id)
    assert not store.is_in_wishlist(tote.id)
    assert store.wishlist_items == []

    store.remove_from_wishlist(tote.id)
    assert store.wishlist_items == []


def test_toggle_wishlist(store, products):
    cap = find_product(products, 18)
    assert store.toggle_wishlist(cap) is True
    assert store.is_in_wishlist(18)
    assert store.toggle_wishlist(cap) is False
    assert not store.is_in_wishlist(18)


def test_search_history_is_bounded_and_most_recent_first(store):
    for n in range(11):
        store.add_to_search_history(f"query {n}")

    assert len(store.search_history) == SEARCH_HISTORY_LIMIT
    assert store.search_history[0] == "query 10"
    assert store.search_history[-1] == "query 1"
    assert "query 0" not in store.search_history


def test_search_history_moves_repeat_to_front(store):
    for q in ["hoodie", "denim", "Hoodie"]:
        store.add_to_search_history(q)
    store.add_to_search_history("hoodie")

    assert store.search_history == ["hoodie", "Hoodie", "denim"]

    store.clear_search_history()
    assert store.search_history == []


def test_logout_clears_user_cart_and_wishlist(store, products):
    store.set_user(guest_user())
    store.add_to_cart(find_product(products, 1), "Black", "M", 1)
    store.add_to_wishlist(find_product(products, 2))
    store.add_to_search_history("coat")

    store.logout()

    assert store.user is None
    assert store.cart_items == []
    assert store.wishlist_items == []
    assert store.search_history == ["coat"]


def test_set_user_replaces_current_user(store):
    store.set_user(guest_user())
    other = guest_user().model_copy(update={"id": "guest-2", "name": "Guest 2"})
    store.set_user(other)
    assert store.user.id == "guest-2"


def test_every_mutation_is_written_through(products):
    backend = MemorySnapshots()
    store = StateStore(backend)
    store.add_to_cart(find_product(products, 1), "Black", "M", 1)
    store.add_to_wishlist(find_product(products, 2))
    store.add_to_search_history("knit")

    assert backend.saves == 3
    assert backend.state["searchHistory"] == ["knit"]
    assert backend.state["cartItems"][0]["product"]["reviewCount"] == 1247


def test_hydrate_restores_snapshot(products):
    backend = MemorySnapshots()
    first = StateStore(backend)
    first.set_user(guest_user())
    item = first.add_to_cart(find_product(products, 11), "Blue", "260", 2)
    first.add_to_wishlist(find_product(products, 17))
    first.add_to_search_history("running")

    second = StateStore(backend)
    second.hydrate()

    assert second.user == guest_user()
    assert second.cart_items[0].id == item.id
    assert second.cart_items[0].quantity == 2
    assert second.is_in_wishlist(17)
    assert second.search_history == ["running"]

    second.add_to_cart(find_product(products, 11), "Blue", "260", 1)
    assert len(second.cart_items) == 1
    assert second.get_cart_total() == 129000 * 3


def test_persistence_failure_keeps_in_memory_state(products, caplog):
    store = StateStore(BrokenSnapshots())
    with caplog.at_level(logging.WARNING, logger="store"):
        store.hydrate()
        store.add_to_cart(find_product(products, 1), "Black", "M", 1)

    assert store.get_cart_count() == 1
    assert "Could not persist store snapshot" in caplog.text
    assert "Could not restore store snapshot" in caplog.text


def test_registry_keeps_sessions_independent(products):
    backends = {}
    registry = StoreRegistry(lambda sid: backends.setdefault(sid, MemorySnapshots()))

    a = registry.get("a")
    b = registry.get("b")
    a.add_to_cart(find_product(products, 1), "Black", "M", 1)

    assert registry.get("a") is a
    assert b.cart_items == []
    assert len(registry) == 2
    assert backends["a"].state["cartItems"]
    assert backends["b"].state is None


def test_quantity_in_cart_spans_lines(store, products):
    coat = find_product(products, 9)
    store.add_to_cart(coat, "Beige", "M", 2)
    store.add_to_cart(coat, "Navy", "L", 3)
    store.add_to_cart(find_product(products, 1), "Black", "M", 1)

    assert store.quantity_in_cart(9) == 5
    assert store.quantity_in_cart(2) == 0


def test_registry_evicts_least_recently_used(products, caplog):
    backends = {}
    registry = StoreRegistry(lambda sid: backends.setdefault(sid, MemorySnapshots()), max_sessions=3)

    with caplog.at_level(logging.INFO, logger="store"):
        a = registry.get("a")
        a.add_to_cart(find_product(products, 1), "Black", "M", 2)
        registry.get("b")
        registry.get("c")
        registry.get("a")
        registry.get("d")

    assert len(registry) == 3
    assert "b" not in registry
    assert "a" in registry
    assert "session b evicted" in caplog.text

    registry.get("e")
    registry.get("f")
    assert "a" not in registry
    restored = registry.get("a")
    assert restored is not a
    assert restored.get_cart_count() == 2


def test_registry_view_does_not_keep_unknown_sessions(products):
    backends = {"saved": MemorySnapshots()}
    StateStore(backends["saved"]).add_to_wishlist(find_product(products, 4))
    registry = StoreRegistry(lambda sid: backends.setdefault(sid, MemorySnapshots()))

    assert registry.view("saved").is_in_wishlist(4)
    assert registry.view("new").wishlist_items == []
    assert len(registry) == 0

    live = registry.get("new")
    assert registry.view("new") is live


def test_registry_rejects_non_positive_bound():
    with pytest.raises(ValueError):
        StoreRegistry(max_sessions=0)
