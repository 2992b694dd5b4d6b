"""Constants for Cart model field names"""


class CartFields:
    """Field name constants for Cart model"""
    ID = "id"
    EMAIL = "email"
    CART_ITEMS = "cartItems"
    PAYMENT_OPTION = "paymentOption"
    VERSION = "version"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    
    # Line item fields (embedded in CART_ITEMS)
    PRODUCT = "product"
    QUANTITY = "quantity"
    
    # MongoDB specific
    MONGO_ID = "_id"
