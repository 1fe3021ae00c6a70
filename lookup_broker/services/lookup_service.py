import logging

import httpx

from ..core.config import Settings
from ..core.errors import BrokerError, ConfigurationError, PropertyNotFound
from ..core.utils import (
    UNKNOWN,
    extract_population,
    extract_postcode,
    first_result,
    int_field,
    normalize_zip,
    number_field,
    scale_population,
    text_field,
)
from ..data.base import GeoPoint
from ..data.census_client import population_client
from ..data.geocode_client import geocode_client
from ..data.property_client import property_client
from ..schemas import CensusLookupResult, PropertyLookupResult

logger = logging.getLogger(__name__)

class LookupBroker:
    """
    Stateless translator between the map client and three third-party APIs.

      census:   point → Nominatim postcode → Census ZCTA population × scale
      property: point → Geocodio reverse with appended fields

    The two operations fail differently on purpose. The census figure feeds
    an always-visible impact estimate, so every failure collapses into the
    default result. Property data is optional enrichment and its failures
    reach the caller as BrokerError.
    """
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        # Data adapters; the census/property ones are None without a key
        self.geo = geocode_client(settings, transport)
        self.population = population_client(settings, transport)
        self.parcels = property_client(settings, transport)

    def census_fallback(self) -> CensusLookupResult:
        return CensusLookupResult(zip=UNKNOWN, population=self.settings.DEFAULT_POPULATION)

    async def resolve_census(self, lat: float, lon: float) -> CensusLookupResult:
        try:
            return await self._resolve_census(GeoPoint(lat=lat, lon=lon))
        except Exception:
            logger.warning("census lookup fell back to defaults", exc_info=True)
            return self.census_fallback()

    async def _resolve_census(self, point: GeoPoint) -> CensusLookupResult:
        # 1) Reverse geocode to a 5-digit ZIP
        doc = await self.geo.reverse(point)
        zip_code = normalize_zip(extract_postcode(doc))
        population = self.settings.DEFAULT_POPULATION
        if zip_code is None:
            return CensusLookupResult(zip=UNKNOWN, population=population)

        # 2) ZCTA population, only when a Census key is configured
        if self.population is not None:
            table = await self.population.zcta_population(zip_code)
            raw = extract_population(table)
            if raw is None:
                logger.info("no usable population row", extra={"zip": zip_code})
            else:
                population = scale_population(raw, self.settings.POPULATION_SCALE)

        return CensusLookupResult(zip=zip_code, population=population)

    async def resolve_property(self, lat: float, lon: float) -> PropertyLookupResult:
        if self.parcels is None:
            raise ConfigurationError("GEOCODIO_API_KEY is not configured")
        try:
            doc = await self.parcels.reverse(GeoPoint(lat=lat, lon=lon))
        except BrokerError as exc:
            logger.warning("property lookup failed: %s", exc.message)
            raise

        result = first_result(doc)
        if result is None:
            raise PropertyNotFound()

        fields = result.get("fields")
        if not isinstance(fields, dict):
            fields = {}
        return PropertyLookupResult(
            address=text_field(result.get("formatted_address")),
            property_type=text_field(fields.get("property_type")),
            year_built=int_field(fields.get("year_built")),
            bedrooms=int_field(fields.get("bedrooms")),
            bathrooms=number_field(fields.get("bathrooms")),
            sqft=int_field(fields.get("square_footage")),
            lot_size=number_field(fields.get("lot_size")),
            assessed_value=number_field(fields.get("assessed_value")),
            market_value=number_field(fields.get("market_value")),
        )
