"""Example usage of the Printify client."""

import asyncio
import json
from printify_client import PrintifyClient, ClientConfig


async def main():
    """Example: list shops and the products of the configured shop."""

    # Load configuration
    with open('config.json') as f:
        config_data = json.load(f)

    config = ClientConfig(**config_data)

    async with PrintifyClient(config) as client:
        print("Fetching shops...")
        for shop in await client.get_shops():
            print(f"- {shop.id}: {shop.title} ({shop.sales_channel})")

        print("\nFetching products...")
        page = await client.get_products()
        print(f"Page {page.current_page}: {len(page.data)} products")

        for product in page.data:
            print(f"\n- {product.title}")
            print(f"  Variants: {len(product.variants)}")
            print(f"  Tags: {', '.join(product.tags) or '-'}")


if __name__ == "__main__":
    asyncio.run(main())
