from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.logging import setup_logging, RequestLoggingMiddleware
from app.db.session import create_db_and_tables

# Import models to ensure they are registered with SQLModel metadata
from app.models.user import User
from app.models.product import Product
from app.models.cart import Cart, ProductInCart

logger = setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info("%s started", settings.PROJECT_NAME)
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    lifespan=lifespan,
    description="Carts API for the EZElectronics store"
)

register_error_handlers(app)

@app.get("/")
def read_root():
    return {"message": "Welcome to EZElectronics API. Visit /docs for Swagger UI."}

from app.routers import auth, users, cart

app.include_router(auth.router, prefix=f"{settings.API_PREFIX}/sessions", tags=["sessions"])
app.include_router(users.router, prefix=f"{settings.API_PREFIX}/users", tags=["users"])
app.include_router(cart.router, prefix=f"{settings.API_PREFIX}/carts", tags=["carts"])

app.add_middleware(RequestLoggingMiddleware)

# Add CORS
from fastapi.middleware.cors import CORSMiddleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
