from typing import Protocol, Any
from dataclasses import dataclass

# ----- Data shapes (thin & explicit) -----

@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

# Upstream bodies stay loosely typed; core.utils extracts fields from them.
Document = Any

# ----- Protocols (interfaces) -----

class ReverseGeocodeClient(Protocol):
    async def reverse(self, point: GeoPoint) -> Document: ...

class PopulationClient(Protocol):
    async def zcta_population(self, zip_code: str) -> Document: ...

class PropertyClient(Protocol):
    async def reverse(self, point: GeoPoint) -> Document: ...
