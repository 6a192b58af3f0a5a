import math
from typing import Optional


def ok(data=None, message: Optional[str] = None) -> dict:
    """Success envelope shared by every endpoint: {success, data, message}"""
    body = {"success": True, "data": data}
    if message:
        body["message"] = message
    return body


def paginated(items: list, total: int, page: int, limit: int) -> dict:
    return {
        "data": items,
        "total": total,
        "page": page,
        "limit": limit,
        "totalPages": math.ceil(total / limit) if limit else 0
    }
