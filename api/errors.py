from fastapi import Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.pages import render_error


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
    """
    Render every HTTP error as a small HTML page.
    Wrong methods are reported as 404 like unknown paths.
    """
    status_code = exc.status_code
    detail = exc.detail
    headers = exc.headers

    if status_code == 405:
        status_code = 404
        detail = "Not Found"
        headers = None

    return HTMLResponse(
        render_error(status_code, str(detail)),
        status_code=status_code,
        headers=headers,
    )
