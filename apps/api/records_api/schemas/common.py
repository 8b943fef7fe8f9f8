"""
Shared response schemas.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Uniform body for acknowledgements and errors."""
    message: str


SUCCESS = MessageResponse(message="success")
