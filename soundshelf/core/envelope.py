"""
Soundshelf Response Envelope
Uniform success/error body shape
"""

from typing import Any, Dict, Optional

from .pagination import PageInfo


def pagination_dict(info: PageInfo) -> Dict[str, int]:
    return {
        "page": info.page,
        "limit": info.limit,
        "total": info.total,
        "totalPages": info.total_pages,
    }


def success_envelope(
    data: Any,
    version: str,
    pagination: Optional[PageInfo] = None
) -> Dict[str, Any]:
    """
    Success body: {success, data, version[, pagination]}

    pagination is only present for list endpoints.
    """
    body: Dict[str, Any] = {
        "success": True,
        "data": data,
        "version": version,
    }
    if pagination is not None:
        body["pagination"] = pagination_dict(pagination)
    return body


def error_envelope(message: str, version: str) -> Dict[str, Any]:
    """Failure body: {success: false, message, version}"""
    return {
        "success": False,
        "message": message,
        "version": version,
    }
