# api/main.py
import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from api.dependencies import get_database
from api.routes import books, library, users, wishlist
from bookshelf.exceptions import InvalidArgumentError, NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

app = FastAPI(title="bookshelf")

app.include_router(library.router)
app.include_router(wishlist.router)
app.include_router(books.router)
app.include_router(users.router)

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    get_database().init_db()

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

@app.exception_handler(UpstreamError)
async def upstream_handler(request: Request, exc: UpstreamError):
    logger.error(f"Upstream failure on {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)})

@app.get("/")
async def root():
    return {"message": "bookshelf"}

# Main execution
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["api", "bookshelf"]
    )
