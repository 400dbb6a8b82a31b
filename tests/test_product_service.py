import pytest

from product_service.core.exceptions import NegativeQuantityError, ProductNotFoundError
from product_service.domain.schemas.product import ProductCreate, ProductUpdate
from product_service.infrastructure.repositories.product_repository import ProductRepository
from product_service.services.product_service import ProductService


@pytest.fixture
def service(product_db):
    return ProductService(ProductRepository(product_db))


def _phone(**overrides):
    fields = {
        "name": "Phone",
        "description": "Six inch screen",
        "category": "Electronics",
        "price": 155.0,
        "quantity": 3,
    }
    fields.update(overrides)
    return ProductCreate(**fields)


def test_add_product_assigns_id(service):
    product = service.add_product(_phone())

    assert product.id is not None
    assert service.get_product_by_id(product.id).name == "Phone"


def test_add_product_rejects_negative_quantity(service):
    with pytest.raises(NegativeQuantityError) as exc_info:
        service.add_product(_phone(quantity=-1))

    assert exc_info.value.detail == "Quantity cannot be negative"
    assert exc_info.value.status_code == 400
    assert service.get_all_products() == []


def test_add_product_accepts_zero_quantity(service):
    assert service.add_product(_phone(quantity=0)).quantity == 0


def test_get_missing_product(service):
    with pytest.raises(ProductNotFoundError) as exc_info:
        service.get_product_by_id(1)

    assert exc_info.value.detail == "Product not found with id: 1"
    assert exc_info.value.status_code == 404


def test_update_product_overwrites_every_field(service):
    product = service.add_product(_phone())

    updated = service.update_product(
        product.id,
        ProductUpdate(name="Tablet", description=None, category="Tablets", price=300.0, quantity=7)
    )

    assert updated.id == product.id
    assert updated.name == "Tablet"
    assert updated.description is None
    assert updated.category == "Tablets"
    assert updated.price == 300.0
    assert updated.quantity == 7


def test_update_missing_product(service):
    with pytest.raises(ProductNotFoundError):
        service.update_product(5, ProductUpdate(**_phone().model_dump()))


def test_update_product_rejects_negative_quantity(service):
    product = service.add_product(_phone())

    with pytest.raises(NegativeQuantityError):
        service.update_product(product.id, ProductUpdate(**_phone(quantity=-4).model_dump()))

    assert service.get_product_by_id(product.id).quantity == 3


def test_delete_product(service):
    product = service.add_product(_phone())

    service.delete_product(product.id)

    with pytest.raises(ProductNotFoundError):
        service.get_product_by_id(product.id)


def test_delete_missing_product_leaves_store_untouched(service):
    service.add_product(_phone())

    with pytest.raises(ProductNotFoundError):
        service.delete_product(99)

    assert len(service.get_all_products()) == 1


def test_price_range_is_inclusive(service):
    service.add_product(_phone(name="Cheap", price=10.0))
    service.add_product(_phone(name="Middle", price=50.0))
    service.add_product(_phone(name="Dear", price=100.0))

    names = [p.name for p in service.get_products_by_price_range(10.0, 50.0)]

    assert names == ["Cheap", "Middle"]


def test_price_range_with_min_above_max_is_empty(service):
    service.add_product(_phone(price=20.0))

    assert service.get_products_by_price_range(50.0, 10.0) == []


def test_find_by_name_substring(service):
    service.add_product(_phone(name="Smart Phone"))
    service.add_product(_phone(name="Laptop"))

    assert [p.name for p in service.get_products_by_name("Phone")] == ["Smart Phone"]
    assert service.get_products_by_name("Watch") == []


def test_find_by_name_treats_wildcards_literally(service):
    service.add_product(_phone(name="Phone"))

    assert service.get_products_by_name("%") == []


def test_find_by_category_exact_match(service):
    service.add_product(_phone(name="Phone", category="Electronics"))
    service.add_product(_phone(name="Desk", category="Furniture"))

    assert [p.name for p in service.get_products_by_category("Furniture")] == ["Desk"]
    assert service.get_products_by_category("Furn") == []
