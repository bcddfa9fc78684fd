from typing import Any, Dict, List, Optional

from pydantic import Field

from .common_dto import ApiModel


class PaymentMethodRequest(ApiModel):
    """
    Payment details sent at checkout

    Only the cardholder name and the last 4 digits of the card number ever
    leave the use case; other fields (expiry, CVV) are accepted and dropped.
    """
    cardholder_name: Optional[str] = Field(None, alias="cardholderName")
    card_number: Optional[str] = Field(None, alias="cardNumber")


class CheckoutRequest(ApiModel):
    shipping_address: Optional[Dict[str, Any]] = Field(None, alias="shippingAddress")
    payment_method: Optional[PaymentMethodRequest] = Field(None, alias="paymentMethod")


class PaymentSummary(ApiModel):
    last4: Optional[str] = None
    cardholder_name: Optional[str] = Field(None, alias="cardholderName")


class OrderItemResponse(ApiModel):
    product_id: str = Field(alias="productId")
    name: str
    price: float
    quantity: int
    subtotal: float


class OrderResponse(ApiModel):
    """DTO for the order created by a checkout"""
    order_id: str = Field(alias="orderId")
    purchased_at: str = Field(alias="purchasedAt")
    total: float
    items: List[OrderItemResponse]
    shipping_address: Dict[str, Any] = Field(alias="shippingAddress")
    payment_summary: PaymentSummary = Field(alias="paymentSummary")


class CheckoutResponse(ApiModel):
    success: bool = True
    message: str
    order: OrderResponse


class PurchaseHistoryEntry(ApiModel):
    """DTO for one past order"""
    order_id: str = Field(alias="orderId")
    purchased_at: Optional[str] = Field(None, alias="purchasedAt")
    items: List[OrderItemResponse]
    total: float


class PurchaseHistoryResponse(ApiModel):
    success: bool = True
    history: List[PurchaseHistoryEntry]
