"""Constants for Comment model field names"""


class CommentFields:
    """Field name constants for Comment model"""
    ID = "id"
    AD_ID = "ad_id"
    AUTHOR_ID = "author_id"
    TEXT = "text"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"
