"""Pydantic models for Printify API requests and responses."""

from enum import Enum
from typing import Optional, List, Dict, Any, Union
from pydantic import BaseModel, Field, ConfigDict


class Shop(BaseModel):
    """Printify shop (a seller storefront)."""
    id: Union[int, str]
    title: str
    sales_channel: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class ProductOption(BaseModel):
    """Printable option descriptor (e.g. Colors, Sizes)."""
    name: str

    model_config = ConfigDict(extra="allow")


class ProductVariant(BaseModel):
    """Product variant reference."""
    id: Union[int, str]

    model_config = ConfigDict(extra="allow")


class ProductImage(BaseModel):
    """Product mockup image."""
    src: str

    model_config = ConfigDict(extra="allow")


class Product(BaseModel):
    """Printify product data model."""
    id: str
    title: str
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    options: List[ProductOption] = Field(default_factory=list)
    variants: List[ProductVariant] = Field(default_factory=list)
    images: List[ProductImage] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class ProductPage(BaseModel):
    """A single page of products; the client never follows further pages."""
    current_page: Union[int, str]
    data: List[Product] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class LineItem(BaseModel):
    product_id: str
    variant_id: int
    quantity: int


class Address(BaseModel):
    """Shipping destination. Content is passed through unchecked."""
    first_name: str
    last_name: str
    email: str
    phone: str
    country: str
    region: str = ""
    address1: str
    address2: str
    city: str
    zip: str


class CreateOrderRequest(BaseModel):
    """Payload for creating an order with a single line item."""
    external_id: str
    line_items: List[LineItem] = Field(..., min_length=1, max_length=1)
    shipping_method: int
    send_shipping_notification: bool
    address_to: Address


class OrderCreated(BaseModel):
    id: str

    model_config = ConfigDict(extra="allow")


class OrderToProduction(BaseModel):
    """
    Order echoed back after being sent to production.

    Printify returns whatever it stored, so line items and the address stay
    loosely typed and unknown fields are kept.
    """
    line_items: List[Dict[str, Any]] = Field(default_factory=list)
    address_to: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")


class WebhookTopic(str, Enum):
    """Order lifecycle events Printify can call back about."""
    ORDER_CREATED = "order:created"
    ORDER_SENT_TO_PRODUCTION = "order:sent-to-production"
    ORDER_SHIPMENT_CREATED = "order:shipment:created"
    ORDER_SHIPMENT_DELIVERED = "order:shipment:delivered"


class WebhookRegistration(BaseModel):
    """Outbound payload for registering one webhook."""
    topic: WebhookTopic
    url: str
    secret: str


class Webhook(BaseModel):
    """Webhook as stored by Printify."""
    id: Optional[str] = None
    topic: Optional[str] = None
    url: Optional[str] = None
    shop_id: Optional[Union[int, str]] = None

    model_config = ConfigDict(extra="allow")
