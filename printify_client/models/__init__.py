"""Data models for Printify requests and responses."""

from .printify_models import (
    Shop,
    Product,
    ProductOption,
    ProductVariant,
    ProductImage,
    ProductPage,
    LineItem,
    Address,
    CreateOrderRequest,
    OrderCreated,
    OrderToProduction,
    WebhookTopic,
    WebhookRegistration,
    Webhook,
)

__all__ = [
    "Shop",
    "Product",
    "ProductOption",
    "ProductVariant",
    "ProductImage",
    "ProductPage",
    "LineItem",
    "Address",
    "CreateOrderRequest",
    "OrderCreated",
    "OrderToProduction",
    "WebhookTopic",
    "WebhookRegistration",
    "Webhook",
]
