import httpx
from .base import ReverseGeocodeClient, GeoPoint, Document
from .http import fetch_json
from ..core.config import Settings

class NominatimGeocode(ReverseGeocodeClient):
    """
    OpenStreetMap Nominatim reverse geocoder. No key, but the usage policy
    requires an identifying User-Agent.
    """
    name = "nominatim"

    def __init__(self, base_url: str, user_agent: str, timeout: float = 10,
                 transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport

    async def reverse(self, point: GeoPoint) -> Document:
        return await fetch_json(
            self.name,
            f"{self.base_url}/reverse",
            params={"format": "json", "lat": point.lat, "lon": point.lon},
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            transport=self.transport,
        )

def geocode_client(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> ReverseGeocodeClient:
    return NominatimGeocode(
        settings.NOMINATIM_BASE_URL,
        settings.NOMINATIM_USER_AGENT,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        transport=transport,
    )
