from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def send_success(status_code: int, data: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "success", "data": jsonable_encoder(data)},
    )
