from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from cornprice.errors import ServiceError
from cornprice.schemas.quote import ErrorResponse, HealthResponse

router = APIRouter()


@router.get('/health', response_model=HealthResponse)
def get_health():
    return HealthResponse(status='ok', message='Backend is running!')


@router.get('/corn-price', responses={502: {'model': ErrorResponse}})
def get_corn_price(request: Request):
    service = request.app.state.quote_service
    try:
        quote = service.get_quote()
    except ServiceError as exc:
        return JSONResponse(status_code=502, content=exc.to_payload())
    return quote.to_wire()
