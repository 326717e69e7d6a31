"""Unit tests for the Cart aggregate and its line items."""

import pytest

from shopcart.domain.exceptions import ProductNotInCartError, ValidationError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product, ProductDetails
from shopcart.domain.model.value_objects import Money
from tests.fakes import make_details, make_item


class TestProduct:

    def test_subtotal_is_price_times_amount(self):
        item = make_item(1, amount=3, price="19.90")
        assert item.subtotal == Money.of("59.70")

    def test_zero_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            make_item(1, amount=0)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            make_item(1, amount=-2)

    def test_non_integer_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product(id=1, title="X", price=Money.of(1), image="x.png", amount=1.5)

    def test_non_integer_id_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product(id="1", title="X", price=Money.of(1), image="x.png", amount=1)

    @pytest.mark.parametrize("field", ["title", "image"])
    def test_non_string_text_rejected(self, field):
        values = {"id": 1, "title": "X", "price": Money.of(1), "image": "x.png", "amount": 1}
        values[field] = None
        with pytest.raises(ValidationError, match=f"{field} must be a string"):
            Product(**values)

    def test_details_reject_non_string_title(self):
        with pytest.raises(ValidationError, match="title must be a string"):
            ProductDetails(id=1, title=None, price=Money.of(1), image="x.png")

    def test_details_to_cart_item_carries_metadata(self):
        details = make_details(10, title="X", price="9.99")
        item = details.to_cart_item(1)
        assert (item.id, item.title, item.price, item.image, item.amount) == (
            10, "X", Money.of("9.99"), details.image, 1,
        )


class TestCartInvariants:

    def test_empty_cart(self):
        cart = Cart.empty()
        assert len(cart) == 0
        assert cart.item_count == 0
        assert cart.total == Money.zero()

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            Cart.of([make_item(1), make_item(1, amount=2)])

    def test_with_item_rejects_existing_id(self):
        cart = Cart.of([make_item(1)])
        with pytest.raises(ValidationError, match="already in the cart"):
            cart.with_item(make_item(1))

    def test_with_amount_rejects_zero(self):
        cart = Cart.of([make_item(1)])
        with pytest.raises(ValidationError):
            cart.with_amount(1, 0)


class TestCartTransitions:

    def test_with_item_appends_in_order(self):
        cart = Cart.empty().with_item(make_item(3)).with_item(make_item(1))
        assert [item.id for item in cart] == [3, 1]

    def test_with_amount_keeps_position(self):
        cart = Cart.of([make_item(1), make_item(2), make_item(3)])
        updated = cart.with_amount(2, 5)
        assert [item.id for item in updated] == [1, 2, 3]
        assert updated.find(2).amount == 5

    def test_transitions_do_not_touch_original(self):
        cart = Cart.of([make_item(1)])
        cart.with_amount(1, 4)
        cart.without(1)
        assert cart.find(1).amount == 1

    def test_without_removes_item(self):
        cart = Cart.of([make_item(1), make_item(2)])
        assert [item.id for item in cart.without(1)] == [2]

    def test_without_absent_id_raises(self):
        with pytest.raises(ProductNotInCartError, match="#7"):
            Cart.of([make_item(1)]).without(7)

    def test_with_amount_absent_id_raises(self):
        with pytest.raises(ProductNotInCartError):
            Cart.empty().with_amount(7, 1)


class TestCartTotals:

    def test_total_and_item_count(self):
        cart = Cart.of([make_item(1, amount=2, price="10.00"), make_item(2, amount=1, price="5.50")])
        assert cart.total == Money.of("25.50")
        assert cart.item_count == 3
