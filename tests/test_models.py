import pytest
from pydantic import ValidationError

from printify_client.config import ClientConfig
from printify_client.models.printify_models import (
    Address,
    CreateOrderRequest,
    OrderToProduction,
    Product,
    WebhookRegistration,
    WebhookTopic,
)


def address():
    return {
        "first_name": "John",
        "last_name": "Smith",
        "email": "example@msn.com",
        "phone": "0574 69 21 90",
        "country": "BE",
        "address1": "ExampleBaan 121",
        "address2": "45",
        "city": "Retie",
        "zip": "2470",
    }


def test_config_is_immutable():
    config = ClientConfig(api_key="token", shop_id=1)
    with pytest.raises(ValidationError):
        config.shop_id = 2
    assert config.base_url == "https://api.printify.com/v1"


def test_config_requires_api_key():
    with pytest.raises(ValidationError):
        ClientConfig(shop_id=1)


def test_product_keeps_unknown_fields():
    product = Product(**{
        "id": "p1",
        "title": "Tee",
        "visible": True,
        "print_provider_id": 5,
    })
    assert product.description == ""
    assert product.tags == []
    assert product.model_extra == {"visible": True, "print_provider_id": 5}


def test_address_region_defaults_to_empty():
    assert Address(**address()).region == ""


def test_order_takes_exactly_one_line_item():
    item = {"product_id": "p1", "variant_id": 1, "quantity": 1}
    base = {
        "external_id": "ext-1",
        "shipping_method": 1,
        "send_shipping_notification": True,
        "address_to": address(),
    }
    CreateOrderRequest(**base, line_items=[item])

    with pytest.raises(ValidationError):
        CreateOrderRequest(**base, line_items=[item, item])
    with pytest.raises(ValidationError):
        CreateOrderRequest(**base, line_items=[])


def test_order_to_production_is_open_ended():
    result = OrderToProduction(**{
        "line_items": [{"product_id": "p1", "status": "on-hold", "metadata": {"sku": "X"}}],
        "address_to": {"country": "BE", "anything": [1, 2]},
        "status": "in-production",
    })
    assert result.line_items[0]["metadata"] == {"sku": "X"}
    assert result.address_to["anything"] == [1, 2]
    assert result.model_extra["status"] == "in-production"


def test_webhook_topics_are_a_closed_set():
    assert {t.value for t in WebhookTopic} == {
        "order:created",
        "order:sent-to-production",
        "order:shipment:created",
        "order:shipment:delivered",
    }
    registration = WebhookRegistration(topic="order:shipment:created", url="https://a", secret="s")
    assert registration.topic is WebhookTopic.ORDER_SHIPMENT_CREATED

    with pytest.raises(ValidationError):
        WebhookRegistration(topic="product:publish:started", url="https://a", secret="s")
