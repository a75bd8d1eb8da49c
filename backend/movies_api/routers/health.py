from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from movies_api.db import check_connection
from movies_api.core.exceptions import DatabaseUnavailableException

router = APIRouter(tags=["health"])

@router.get("/health")
def health(request: Request):
    try:
        check_connection(request.app.state.engine)
    except SQLAlchemyError:
        error = DatabaseUnavailableException()
        return JSONResponse(
            status_code=error.status_code,
            content={"status": "error", "database": error.message}
        )
    return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "ok", "database": "ok"})
