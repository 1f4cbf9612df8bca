"""
Response envelope shared by every endpoint:
``{"success": true, "data": ..., "count": n}`` or ``{"success": false, "error": "..."}``.
"""
from typing import Any, Optional

from fastapi.responses import JSONResponse


def success_response(data: Any = None, count: Optional[int] = None, status_code: int = 200) -> JSONResponse:
    content = {"success": True, "data": data}
    if count is not None:
        content["count"] = count
    return JSONResponse(status_code=status_code, content=content)


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})
