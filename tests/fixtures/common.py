"""
Common/Shared Fixtures

Base factories and generators used across test layers.
"""
import uuid
from typing import Optional


def make_handle() -> str:
    """Generate a well-formed 32 character hex resource id"""
    return uuid.uuid4().hex


def make_user_id(prefix: Optional[str] = None) -> str:
    """Generate a unique user ID"""
    return f"{prefix or 'user'}_{uuid.uuid4().hex[:8]}"


def make_record_id() -> str:
    """Generate a store-assigned record id (24 hex chars, like CrudCrud)"""
    return uuid.uuid4().hex[:24]


def make_discovery_page(handle: str) -> str:
    """CrudCrud homepage HTML with the resource id in the endpoint link"""
    return (
        "<html><head><title>CrudCrud</title></head><body>"
        "<p>Use this unique URL as your REST endpoint:</p>"
        f'<a href="https://crudcrud.com/api/{handle}">https://crudcrud.com/api/{handle}</a>'
        "</body></html>"
    )
