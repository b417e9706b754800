from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

class APIException(HTTPException):
    status_code_default = 400

    def __init__(self, detail: str, status_code: int | None = None):
        super().__init__(status_code=status_code or self.status_code_default, detail=detail)

class DuplicateSKU(APIException):
    status_code_default = 400

    def __init__(self, sku: str):
        self.sku = sku
        super().__init__("Product SKU already exists")

class NotFound(APIException):
    status_code_default = 404

class Unauthorized(APIException):
    status_code_default = 401

class ValidationError(APIException):
    status_code_default = 400

class DeliveryFailure(Exception):
    """Raised by notifiers when the external channel rejects or fails a message."""

    def __init__(self, recipient: str, reason: str):
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Delivery to {recipient} failed: {reason}")

def create_error_response(error_message: str, status_code: int = 400) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }

async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Custom exception handler for HTTPException"""
    # HTTPBearer reports a missing header as 403
    if exc.status_code == 403 and "Not authenticated" in str(exc.detail):
        return JSONResponse(
            status_code=401,
            content=create_error_response("Authentication required", 401)
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail, exc.status_code),
        headers=getattr(exc, "headers", None),
    )
