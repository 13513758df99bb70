import logging
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map to a fixed HTTP status."""

    custom_message = "Internal Server Error"
    custom_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, message: Optional[str] = None):
        if message:
            self.custom_message = message
        super().__init__(self.custom_message)


# --- Authentication / authorization ---
class UnauthenticatedError(AppError):
    custom_message = "Unauthenticated user"
    custom_code = status.HTTP_401_UNAUTHORIZED

class UnauthorizedUserError(AppError):
    custom_message = "User is not authorized"
    custom_code = status.HTTP_401_UNAUTHORIZED

class InvalidCredentialsError(AppError):
    custom_message = "Incorrect username and/or password"
    custom_code = status.HTTP_401_UNAUTHORIZED

class UserAlreadyExistsError(AppError):
    custom_message = "The username already exists"
    custom_code = status.HTTP_409_CONFLICT


# --- Carts ---
class CartNotFoundError(AppError):
    custom_message = "Cart not found"
    custom_code = status.HTTP_404_NOT_FOUND

class ProductNotInCartError(AppError):
    custom_message = "Product not in cart"
    custom_code = status.HTTP_404_NOT_FOUND

class EmptyCartError(AppError):
    custom_message = "Cart is empty"
    custom_code = status.HTTP_400_BAD_REQUEST


# --- Products ---
class ProductNotFoundError(AppError):
    custom_message = "Product not found"
    custom_code = status.HTTP_404_NOT_FOUND

class EmptyProductStockError(AppError):
    custom_message = "Product stock is empty"
    custom_code = status.HTTP_409_CONFLICT

class LowProductStockError(AppError):
    custom_message = "Product stock cannot satisfy the requested quantity"
    custom_code = status.HTTP_400_BAD_REQUEST


VALIDATION_HEADER = "The parameters are not formatted properly\n\n"

def format_validation_errors(errors) -> str:
    """
    Render validation errors one line per parameter:
    - Parameter: **model** - Reason: *Invalid value* - Location: *body*
    """
    message = VALIDATION_HEADER
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        location = loc[0] if loc else "body"
        parameter = ".".join(loc[1:]) or location
        message += f"- Parameter: **{parameter}** - Reason: *Invalid value* - Location: *{location}*\n\n"
    return message


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.custom_code,
        content={"error": exc.custom_message, "status": exc.custom_code},
    )

async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"error": format_validation_errors(exc.errors())},
    )

async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    code = AppError.custom_code
    return JSONResponse(
        status_code=code,
        content={"error": AppError.custom_message, "status": code},
    )

def register_error_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
