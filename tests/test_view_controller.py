# run with: pytest tests/test_view_controller.py -v

from lumina.core.models import ALL_CATEGORIES
from lumina.core.view import ViewController


def ids(products):
    return [p.id for p in products]


# CTRL-001: defaults
def test_defaults(catalog):
    view = ViewController(catalog)
    assert view.active_category == ALL_CATEGORIES
    assert view.search_query == ""
    assert view.selected_product is None
    assert view.cart_drawer_open is False
    assert len(view.visible_products) == 5


# CTRL-002: visible products follow filter changes
def test_visible_products_follow_filter_changes(catalog):
    view = ViewController(catalog)
    view.set_category("Apparel")
    assert ids(view.visible_products) == ["p1", "p2"]
    view.set_search("scarf")
    assert ids(view.visible_products) == ["p2"]
    view.set_category("Home")
    assert view.visible_products == []


# CTRL-003: clear filters resets both
def test_clear_filters_resets_both(catalog):
    view = ViewController(catalog)
    view.set_category("Tech")
    view.set_search("nothing matches")
    view.clear_filters()
    assert view.active_category == ALL_CATEGORIES
    assert view.search_query == ""
    assert len(view.visible_products) == 5


# CTRL-004: detail and drawer are independent
def test_detail_and_drawer_are_independent(catalog):
    view = ViewController(catalog)
    view.select_product("p3")
    view.open_cart()
    assert view.selected_product.id == "p3"
    assert view.cart_drawer_open
    view.close_detail()
    assert view.cart_drawer_open
    view.select_product("p1")
    view.close_cart()
    assert view.selected_product.id == "p1"


# CTRL-005: select unknown product is noop
def test_select_unknown_product_is_noop(catalog):
    view = ViewController(catalog)
    view.select_product("p2")
    view.select_product("missing")
    assert view.selected_product.id == "p2"


# CTRL-006: cart commands update totals
def test_cart_commands_update_totals(catalog):
    view = ViewController(catalog)
    view.add_to_cart("p5")
    view.add_to_cart("p5")
    view.add_to_cart("p3")
    view.add_to_cart("missing")
    assert view.cart_count == 3
    assert view.cart_total == 12 * 2 + 80
    view.update_quantity("p5", -10)
    view.remove_from_cart("p3")
    assert view.cart_count == 1
    assert view.cart_total == 12


# CTRL-007: add selected to bag
def test_add_selected_to_bag(catalog):
    view = ViewController(catalog)
    view.select_product("p4")
    view.add_selected_to_bag()
    assert view.selected_product is None
    assert view.cart_drawer_open
    assert [(i.id, i.quantity) for i in view.cart] == [("p4", 1)]


# CTRL-008: add selected to bag without selection is noop
def test_add_selected_to_bag_without_selection_is_noop(catalog):
    view = ViewController(catalog)
    view.add_selected_to_bag()
    assert view.cart_count == 0
    assert not view.cart_drawer_open


# CTRL-009: assistant gets the unmodified catalog
def test_assistant_gets_the_unmodified_catalog(catalog):
    view = ViewController(catalog)
    view.set_category("Home")
    view.set_search("lamp")
    assert view.assistant_catalog is catalog.products
    assert len(view.assistant_catalog) == 5


# CTRL-010: snapshot restore
def test_snapshot_restore(catalog):
    view = ViewController(catalog)
    view.set_category("Apparel")
    view.set_search("blue")
    view.select_product("p1")
    view.open_cart()
    view.add_to_cart("p2")
    view.add_to_cart("p1")

    restored = ViewController.restore(catalog, view.snapshot())
    assert restored.active_category == "Apparel"
    assert restored.search_query == "blue"
    assert restored.selected_product.id == "p1"
    assert restored.cart_drawer_open
    assert [i.id for i in restored.cart] == ["p2", "p1"]
    assert ids(restored.visible_products) == ids(view.visible_products)


# CTRL-011: restore from empty session
def test_restore_from_empty_session(catalog):
    view = ViewController.restore(catalog, None)
    assert view.active_category == ALL_CATEGORIES
    assert view.cart_count == 0
