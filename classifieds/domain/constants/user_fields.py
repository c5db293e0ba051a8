"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    PHONE = "phone"
    HASHED_PASSWORD = "hashed_password"
    ROLE = "role"
    AVATAR_PATH = "avatar_path"
    REGISTER_DATE = "register_date"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
