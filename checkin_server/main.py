import asyncio
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from .model.check_in import CheckInEvent, Location
from .model.check_in_request import CheckInRequest
from .model.config import ServiceConfig
from .model.registration import RegistrationRequest
from .service.geocoding_service import AddressLookup
from .service.http_service import HttpServiceManager
from .service.location_service import LocationError, LocationResolver, ReportedPositionProvider
from .service.notification_service import NotificationDispatcher
from .util.time_util import TimeUtil


load_dotenv()

app = FastAPI()
logger = logging.getLogger("uvicorn")
logger.setLevel(logging.INFO)

config = ServiceConfig.from_env()
dispatcher = NotificationDispatcher(config)
address_lookup = AddressLookup(
    api_url=config.geocoding_api_url,
    http_service=HttpServiceManager(timeout=config.request_timeout),
)


async def resolve_location(request: CheckInRequest) -> tuple[Optional[Location], Optional[LocationError]]:
    provider = None
    if request.location_supported:
        if request.position is None and request.location_error_code is None:
            return None, None
        provider = ReportedPositionProvider(position=request.position, error_code=request.location_error_code)

    resolver = LocationResolver(provider)
    try:
        position = await resolver.resolve()
    except LocationError as e:
        logger.info(f"{request.full_name} checks in without location : {e}")
        return None, e

    address = request.address
    if not address:
        address = await asyncio.to_thread(address_lookup.lookup, position.latitude, position.longitude)

    return position.to_location(address), None


@app.get("/health", status_code=200)
async def health():
    return {"status": "ok", "telegram_configured": config.telegram_configured}


@app.post("/check-in", status_code=201)
async def check_in(request: CheckInRequest):
    location, location_error = await resolve_location(request)

    event = CheckInEvent(
        full_name=request.full_name,
        phone_number=request.phone_number,
        industry=request.industry,
        attendee_type=request.attendee_type,
        invited_by=request.invited_by,
        location=location,
        timestamp=request.timestamp or TimeUtil.now_timestamp(),
    )

    delivered: bool = await asyncio.to_thread(dispatcher.dispatch, event)
    if not delivered:
        raise HTTPException(status_code=502, detail="Check-in notification could not be delivered")

    response: dict[str, Any] = {"delivered": True, "location_error": None}
    if location_error is not None:
        response["location_error"] = {
            "code": location_error.code,
            "name": location_error.name,
            "message": location_error.message,
        }

    return response


@app.post("/register", status_code=201)
async def register(registration: RegistrationRequest):
    logger.info(f"Registration data : {registration.model_dump()}")

    return {"status": "registered"}
