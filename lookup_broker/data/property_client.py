import httpx
from .base import PropertyClient, GeoPoint, Document
from .http import fetch_json
from ..core.config import Settings

class GeocodioProperty(PropertyClient):
    """
    Geocodio reverse geocoding with appended field tiers. The broker reads
    results[0].formatted_address and results[0].fields.
    """
    name = "geocodio"

    def __init__(self, base_url: str, api_key: str, fields: str = "cd",
                 timeout: float = 10, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.fields = fields
        self.timeout = timeout
        self.transport = transport

    async def reverse(self, point: GeoPoint) -> Document:
        return await fetch_json(
            self.name,
            f"{self.base_url}/reverse",
            params={"q": f"{point.lat},{point.lon}", "fields": self.fields, "api_key": self.api_key},
            timeout=self.timeout,
            transport=self.transport,
        )

def property_client(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> PropertyClient | None:
    if not settings.GEOCODIO_API_KEY:
        return None
    return GeocodioProperty(
        settings.GEOCODIO_BASE_URL,
        settings.GEOCODIO_API_KEY,
        fields=settings.GEOCODIO_FIELDS,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        transport=transport,
    )
