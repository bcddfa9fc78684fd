from typing import List, Optional

from pydantic import Field

from .common_dto import ApiModel


class AddToCartRequest(ApiModel):
    """DTO for adding a catalog product to the cart"""
    product_id: Optional[str] = Field(None, alias="productId")
    quantity: Optional[int] = 1


class UpdateCartItemRequest(ApiModel):
    """DTO for changing the quantity of a cart line (0 removes it)"""
    quantity: Optional[int] = None


class CartItemResponse(ApiModel):
    product_id: str = Field(alias="productId")
    name: str
    price: float
    quantity: int


class CartResponse(ApiModel):
    """DTO for the cart contents and total"""
    success: bool = True
    cart: List[CartItemResponse]
    total: float
