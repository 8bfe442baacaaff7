"""Example: register webhooks, place an order and report a publish, against the sandbox."""

import asyncio
import httpx

from printify_client import PrintifyClient, ClientConfig, MockPrintifyTransport
from printify_client.models import CreateOrderRequest, WebhookTopic


async def main():
    config = ClientConfig(api_key="sandbox-token", shop_id=1234567)
    transport = MockPrintifyTransport()

    async with httpx.AsyncClient(transport=transport) as http:
        client = PrintifyClient(config, client=http)

        hooks = await client.create_webhooks([
            {"topic": topic, "url": "https://hooks.example.com/printify", "secret": "s3cret"}
            for topic in WebhookTopic
        ])
        print(f"Registered {len(hooks)} webhooks")

        order = CreateOrderRequest(
            external_id="2750e210-39bb-11e9-a503-452618153e4a",
            line_items=[{"product_id": "5d39b159e7c48c000728c89f", "variant_id": 33719, "quantity": 1}],
            shipping_method=1,
            send_shipping_notification=False,
            address_to={
                "first_name": "John",
                "last_name": "Smith",
                "email": "example@msn.com",
                "phone": "0574 69 21 90",
                "country": "BE",
                "address1": "ExampleBaan 121",
                "address2": "45",
                "city": "Retie",
                "zip": "2470",
            },
        )
        created = await client.create_order(order)
        result = await client.send_order_to_production(created.id)
        print(f"Order {created.id} sent to production ({len(result.line_items)} line items)")

        product_id = "5d39b159e7c48c000728c89f"
        await client.publish(product_id)
        await client.set_publish_status_succeeded(product_id, handle="https://shop.example.com/mug")
        print(f"Published {product_id}")

    print(f"\n{len(transport.requests)} requests sent")


if __name__ == "__main__":
    asyncio.run(main())
