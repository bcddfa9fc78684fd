"""Constants for User document field names"""


class UserFields:
    """Field name constants for the users collection"""
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    FULL_NAME = "fullName"
    BIO = "bio"
    CART = "cart"
    PURCHASE_HISTORY = "purchaseHistory"

    # MongoDB specific
    MONGO_ID = "_id"  # user ID is stored directly as _id


class CartItemFields:
    """Field name constants for embedded cart lines"""
    PRODUCT_ID = "productId"
    NAME = "name"
    PRICE = "price"
    QUANTITY = "quantity"


class PurchaseRecordFields:
    """Field name constants for embedded purchase history records"""
    ID = "id"
    NAME = "name"
    PRICE = "price"
    QUANTITY = "quantity"
