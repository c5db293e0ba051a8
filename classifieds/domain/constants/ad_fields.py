"""Constants for Ad model field names"""


class AdFields:
    """Field name constants for Ad model"""
    ID = "id"
    AUTHOR_ID = "author_id"
    TITLE = "title"
    PRICE = "price"
    DESCRIPTION = "description"
    IMAGE_PATH = "image_path"

    # MongoDB specific
    MONGO_ID = "_id"
