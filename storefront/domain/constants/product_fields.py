"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product model"""
    ID = "id"
    NAME = "name"
    CATEGORY = "category"
    COST = "cost"
    RATING = "rating"
    IMAGE = "image"
    
    # MongoDB specific
    MONGO_ID = "_id"
