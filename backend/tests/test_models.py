import pytest
from sqlalchemy import inspect

from app.models import Listing, ListingImage, Order, OrderItem, User, Voucher


@pytest.mark.parametrize("model", [User, Listing, ListingImage, Order, OrderItem, Voucher])
def test_marketplace_snapshots_are_plain_tables(model):
    # read through explicit joins in services.tools; no lazy loads
    assert list(inspect(model).relationships) == []


def test_foreign_keys_link_orders_to_listings_and_users():
    targets = {fk.target_fullname for fk in OrderItem.__table__.foreign_keys}
    assert targets == {"orders.order_id", "listings.listing_id"}
    assert {fk.target_fullname for fk in Order.__table__.foreign_keys} == {"users.user_id"}
    assert {fk.target_fullname for fk in Listing.__table__.foreign_keys} == {"users.user_id"}
