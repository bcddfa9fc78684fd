"""Constants for Order and Token document field names"""


class OrderFields:
    """Field name constants for the orders collection"""
    USER_ID = "userId"
    ITEMS = "items"
    TOTAL = "total"
    TIMESTAMP = "timestamp"

    # Line item fields; productId and id both carry the product ID
    PRODUCT_ID = "productId"
    ITEM_ID = "id"
    NAME = "name"
    PRICE = "price"
    QUANTITY = "quantity"
    SUBTOTAL = "subtotal"

    # MongoDB specific
    MONGO_ID = "_id"  # order ID


class TokenFields:
    """Field name constants for the tokens collection"""
    TOKEN = "token"
    USER_ID = "userId"
    CREATED_AT = "createdAt"
