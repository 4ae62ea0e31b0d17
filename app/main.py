from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.parse import router as parse_router

app = FastAPI(title="agendaparse")

app.include_router(parse_router, tags=["Parse"])


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": str(exc.detail)},
    )


@app.exception_handler(RequestValidationError)
async def body_error_handler(request: Request, exc: RequestValidationError):
    # Body absent ou non-JSON : réponse structurée plutôt qu'un 422 brut
    return JSONResponse(
        status_code=400,
        content={"status": "error", "message": "Corps de requête invalide (JSON objet attendu)"},
    )
