"""
Soundshelf Common Schemas
Envelope parts shared by every endpoint
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope"""
    success: bool = False
    message: str
    version: str


class PaginationInfo(BaseModel):
    """List pagination metadata"""
    page: int
    limit: int
    total: int
    totalPages: int
