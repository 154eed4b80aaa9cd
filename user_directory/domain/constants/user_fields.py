"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    EMAIL = "email"

    # JSON (wire) names that differ from the attribute names
    WIRE_FULL_NAME = "fullName"
    WIRE_TOKEN_TYPE = "tokenType"
    WIRE_USER_ID = "userId"

    # JWT claims
    SUBJECT = "sub"
