"""Payloads shared by several routers."""

from pydantic import BaseModel


class OperationResult(BaseModel):
    """Acknowledgement returned by small AJAX-style actions."""

    success: bool
    message: str
