"""HTTP error mapping for use case failures"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from libs.result import Error


class ClientError(Exception):
    """Use case error surfaced to the HTTP caller"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.error.code,
                "message": exc.error.message,
            }
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
