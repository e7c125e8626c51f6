import secrets

from .logger import logger

GUID_BYTES = 9

def generate_guid() -> str:
    """
    Generate a new bookmark identifier.
    Nine random bytes encode to a twelve character URL-safe string, the
    same shape as the identifiers issued by the bookmarks service.
    """
    guid = secrets.token_urlsafe(GUID_BYTES)
    logger.debug(f"Generated guid {guid}")
    return guid
