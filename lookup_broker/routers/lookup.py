import logging
from typing import TypeVar

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from ..core.errors import InvalidRequestBody
from ..schemas import (
    CensusLookupRequest,
    CensusLookupResult,
    CoordinateRequest,
    ErrorResponse,
    PropertyLookupRequest,
    PropertyLookupResult,
)
from ..services.lookup_service import LookupBroker

logger = logging.getLogger(__name__)

router = APIRouter()

R = TypeVar("R", bound=CoordinateRequest)

def broker_dep(request: Request) -> LookupBroker:
    # Built once in create_app; holds config and client factories only
    return request.app.state.broker

async def read_coordinates(request: Request, model: type[R]) -> R:
    """
    Bodies are parsed by hand rather than by FastAPI so a bad body follows
    each operation's own failure policy instead of a generic 422.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        raise InvalidRequestBody("Request body is not valid JSON") from exc
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise InvalidRequestBody("Request body must contain numeric lat and lon") from exc

@router.post("/census-lookup", response_model=CensusLookupResult)
async def census_lookup(request: Request, broker: LookupBroker = Depends(broker_dep)):
    try:
        body = await read_coordinates(request, CensusLookupRequest)
    except InvalidRequestBody as exc:
        logger.warning("census lookup fell back to defaults: %s", exc.message)
        return broker.census_fallback()
    return await broker.resolve_census(body.lat, body.lon)

@router.post(
    "/property-lookup",
    response_model=PropertyLookupResult,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def property_lookup(request: Request, broker: LookupBroker = Depends(broker_dep)):
    body = await read_coordinates(request, PropertyLookupRequest)
    return await broker.resolve_property(body.lat, body.lon)
