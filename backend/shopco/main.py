"""
shopco/main.py - FastAPI application.

- Routers: /api/cart (carts) and /api/auth (register/login).
- CORS from `settings.allowed_origins` (list or `*`).
- Every error is answered as `{"success": false, "message", "error"}`:
  domain errors with their own status, request validation errors with 422 and
  anything unexpected with 500.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shopco.config import settings
from shopco.core.errors import ShopError
from shopco.routers import auth, carts

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("shopco.app")

if settings.password_scheme == "plaintext":
    logger.warning("PASSWORD_SCHEME=plaintext: passwords are stored and compared unhashed")

# Initialize FastAPI app
app = FastAPI(
    title="SHOP.CO API",
    description="Shopping cart and basic account storage backed by Firestore.",
    version="1.0.0",
)

# Configure CORS (allow front-end domain or all origins as specified)
allow_origins = [origin.strip() for origin in settings.allowed_origins.split(',')] if settings.allowed_origins else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(carts.router)
app.include_router(auth.router)


def _error(status_code: int, message: str, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "error": error},
    )


@app.exception_handler(ShopError)
async def _shop_error(request: Request, exc: ShopError):
    return _error(exc.status_code, exc.message, exc.error)


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    where = ".".join(str(p) for p in first.get("loc", ()))
    return _error(422, f"Invalid request: {where} {first.get('msg', '')}".strip(), "INVALID_REQUEST")


@app.exception_handler(Exception)
async def _unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error", str(exc))


@app.get("/")
def root():
    return {"message": "SHOP.CO API is running!"}


# Run the app directly with uvicorn (for development)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("shopco.main:app", host=settings.host, port=settings.port, reload=settings.debug)
