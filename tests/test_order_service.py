from unittest.mock import create_autospec

import httpx
import pytest

from order_service.clients.product_client import ProductClient
from order_service.clients.user_client import UserClient
from order_service.core.exceptions import (
    InsufficientQuantityError,
    OrderNotFoundError,
    ProductNotFoundError,
    UpstreamServiceError,
    UserNotFoundError,
)
from order_service.domain.models.order import OrderStatus
from order_service.domain.schemas.order import OrderCreate
from order_service.domain.schemas.remote import ProductData, UserData
from order_service.infrastructure.repositories.order_repository import OrderRepository
from order_service.services.order_service import OrderService


def _product(product_id, price, quantity):
    return ProductData(
        id=product_id,
        name=f"Product {product_id}",
        description=None,
        category="Misc",
        price=price,
        quantity=quantity
    )


@pytest.fixture
def product_client():
    return create_autospec(ProductClient, instance=True)


@pytest.fixture
def user_client():
    client = create_autospec(UserClient, instance=True)
    client.get_user_by_id.return_value = UserData(id=1, name="Test User", role="CUSTOMER", orders_list=[])
    return client


@pytest.fixture
def repository(order_db):
    return OrderRepository(order_db)


@pytest.fixture
def service(repository, product_client, user_client):
    return OrderService(repository, product_client, user_client)


def _stock(product_client, *products):
    by_id = {p.id: p for p in products}
    product_client.get_product_by_id.side_effect = lambda product_id: by_id.get(product_id)


def test_place_order(service, repository, product_client, user_client):
    _stock(product_client, _product(1, 10.0, 5))

    order = service.place_order(OrderCreate(user_id=1, order_items={1: 2}))

    assert order.id is not None
    assert order.total_price == 20.0
    assert order.status == OrderStatus.PLACED
    assert order.order_items == {1: 2}

    product_id, updated = product_client.update_product.call_args.args
    assert product_id == 1
    assert updated.quantity == 3
    user_client.add_order_to_user.assert_called_once_with(1, order.id)
    assert [o.id for o in repository.list_all()] == [order.id]


def test_place_order_sums_every_item(service, product_client):
    _stock(product_client, _product(1, 10.0, 5), _product(2, 2.5, 4))

    order = service.place_order(OrderCreate(user_id=1, order_items={1: 2, 2: 3}))

    assert order.total_price == 27.5
    assert order.order_items == {1: 2, 2: 3}
    assert product_client.update_product.call_count == 2


def test_place_order_can_take_all_stock(service, product_client):
    _stock(product_client, _product(1, 4.0, 2))

    service.place_order(OrderCreate(user_id=1, order_items={1: 2}))

    assert product_client.update_product.call_args.args[1].quantity == 0


def test_unknown_user(service, repository, product_client, user_client):
    user_client.get_user_by_id.return_value = None

    with pytest.raises(UserNotFoundError) as exc_info:
        service.place_order(OrderCreate(user_id=1, order_items={1: 2}))

    assert exc_info.value.detail == "User not found with id: 1"
    product_client.get_product_by_id.assert_not_called()
    assert repository.list_all() == []


def test_user_service_failure_reads_as_unknown_user(service, product_client, user_client):
    user_client.get_user_by_id.side_effect = UpstreamServiceError("user-service", detail="boom")

    with pytest.raises(UserNotFoundError) as exc_info:
        service.place_order(OrderCreate(user_id=1, order_items={1: 2}))

    assert isinstance(exc_info.value.__cause__, UpstreamServiceError)
    product_client.get_product_by_id.assert_not_called()


def test_malformed_user_reads_as_unknown_user(repository, product_client):
    def handler(request):
        return httpx.Response(200, json={"unexpected": True})

    user_client = UserClient(
        "http://users.local",
        http_client=httpx.Client(transport=httpx.MockTransport(handler))
    )
    service = OrderService(repository, product_client, user_client)

    with pytest.raises(UserNotFoundError) as exc_info:
        service.place_order(OrderCreate(user_id=1, order_items={1: 2}))

    assert exc_info.value.detail == "User not found with id: 1"
    product_client.get_product_by_id.assert_not_called()
    assert repository.list_all() == []


def test_failed_stock_update_stops_placement(service, repository, product_client, user_client):
    _stock(product_client, _product(1, 10.0, 5), _product(2, 1.0, 5))
    product_client.update_product.side_effect = [
        _product(1, 10.0, 3),
        UpstreamServiceError("product-service", detail="Quantity cannot be negative"),
    ]

    with pytest.raises(UpstreamServiceError) as exc_info:
        service.place_order(OrderCreate(user_id=1, order_items={1: 2, 2: 1}))

    assert exc_info.value.detail == "Quantity cannot be negative"
    assert [call.args[0] for call in product_client.update_product.call_args_list] == [1, 2]
    user_client.add_order_to_user.assert_not_called()
    assert repository.list_all() == []


def test_unknown_product(service, repository, product_client, user_client):
    _stock(product_client)

    with pytest.raises(ProductNotFoundError) as exc_info:
        service.place_order(OrderCreate(user_id=1, order_items={7: 1}))

    assert exc_info.value.detail == "Product not found with id: 7"
    product_client.update_product.assert_not_called()
    user_client.add_order_to_user.assert_not_called()
    assert repository.list_all() == []


def test_insufficient_quantity(service, repository, product_client, user_client):
    _stock(product_client, _product(1, 10.0, 5))

    with pytest.raises(InsufficientQuantityError) as exc_info:
        service.place_order(OrderCreate(user_id=1, order_items={1: 6}))

    assert exc_info.value.detail == "Insufficient quantity for product: 1"
    assert exc_info.value.status_code == 400
    product_client.update_product.assert_not_called()
    user_client.add_order_to_user.assert_not_called()
    assert repository.list_all() == []


def test_failed_item_keeps_earlier_decrements(service, repository, product_client):
    _stock(product_client, _product(1, 10.0, 5), _product(2, 1.0, 1))

    with pytest.raises(InsufficientQuantityError):
        service.place_order(OrderCreate(user_id=1, order_items={1: 2, 2: 3}))

    product_client.update_product.assert_called_once()
    assert product_client.update_product.call_args.args[0] == 1
    assert repository.list_all() == []


def test_failed_order_list_update_keeps_order(service, repository, product_client, user_client):
    _stock(product_client, _product(1, 10.0, 5))
    user_client.add_order_to_user.side_effect = UpstreamServiceError("user-service", detail="User not found with id: 1")

    with pytest.raises(UpstreamServiceError):
        service.place_order(OrderCreate(user_id=1, order_items={1: 1}))

    assert len(repository.list_all()) == 1


def test_get_order_by_id(service, product_client):
    _stock(product_client, _product(1, 10.0, 5))
    placed = service.place_order(OrderCreate(user_id=1, order_items={1: 1}))

    assert service.get_order_by_id(placed.id).total_price == 10.0


def test_get_missing_order(service):
    with pytest.raises(OrderNotFoundError) as exc_info:
        service.get_order_by_id(99)

    assert exc_info.value.detail == "Order not found with id: 99"


def test_get_orders_by_user_id(service, repository, product_client):
    _stock(product_client, _product(1, 10.0, 50))
    first = service.place_order(OrderCreate(user_id=1, order_items={1: 1}))
    repository.create(user_id=2, order_items={1: 1}, total_price=10.0)
    second = service.place_order(OrderCreate(user_id=1, order_items={1: 2}))

    assert [o.id for o in service.get_orders_by_user_id(1)] == [first.id, second.id]
    assert service.get_orders_by_user_id(3) == []
    assert len(service.get_all_orders()) == 3
