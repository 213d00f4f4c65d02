"""
User-facing error messages

One human-readable message per error kind. Terminal failures tell the user
to retry or refresh.
"""

from typing import Dict, Type

from .protocols import (
    BadRequestError,
    CampaignAccessError,
    CampaignServiceError,
    CampaignValidationError,
    ExpiredResourceError,
    InvalidHandleError,
    NetworkError,
    NotFoundError,
    ProvisionError,
    ServiceUnavailableError,
    UnauthorizedError,
    UnavailableError,
)

DEFAULT_MESSAGE = "An unexpected error occurred. Please try again."

USER_MESSAGES: Dict[Type[Exception], str] = {
    UnavailableError: (
        "Unable to connect to CrudCrud. Please check your internet connection and try again."
    ),
    ProvisionError: (
        "Could not obtain a new CrudCrud resource ID. Please try again, or set one "
        "manually from https://crudcrud.com."
    ),
    ExpiredResourceError: (
        "Your CrudCrud data bucket has expired and could not be renewed. "
        "Please refresh the page and try again."
    ),
    NotFoundError: "Campaign not found. It may have been deleted.",
    ServiceUnavailableError: (
        "The data service is temporarily unavailable. Please try again in a few minutes."
    ),
    NetworkError: (
        "A network error occurred. Please check your internet connection and try again."
    ),
    BadRequestError: "The request was rejected. Please review the campaign details and try again.",
    UnauthorizedError: "The data service refused access. Please refresh the page and try again.",
    InvalidHandleError: "Invalid resource ID format. Expected a 32+ character hex string.",
    CampaignAccessError: "You do not have permission to access this campaign.",
    CampaignValidationError: "Please correct the highlighted campaign fields.",
    CampaignServiceError: DEFAULT_MESSAGE,
}


def user_message(error: BaseException) -> str:
    """Message for the most specific known error class"""
    for cls in type(error).__mro__:
        if cls in USER_MESSAGES:
            return USER_MESSAGES[cls]
    return DEFAULT_MESSAGE


__all__ = ["USER_MESSAGES", "DEFAULT_MESSAGE", "user_message"]
