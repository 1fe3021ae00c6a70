from pydantic import BaseModel, ConfigDict, Field

class CoordinateRequest(BaseModel):
    # No range checks: bad coordinates are the upstreams' problem
    lat: float
    lon: float

class CensusLookupRequest(CoordinateRequest):
    pass

class PropertyLookupRequest(CoordinateRequest):
    pass

class CensusLookupResult(BaseModel):
    zip: str = Field(pattern=r"^(\d{5}|Unknown)$")
    population: int = Field(ge=0)

class PropertyLookupResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    address: str = "Unknown"
    property_type: str = Field(default="Unknown", alias="propertyType")
    year_built: int | None = Field(default=None, alias="yearBuilt")
    bedrooms: int | None = None
    bathrooms: int | float | None = None
    sqft: int | None = None
    lot_size: int | float | None = Field(default=None, alias="lotSize")
    assessed_value: int | float | None = Field(default=None, alias="assessedValue")
    market_value: int | float | None = Field(default=None, alias="marketValue")

class ErrorResponse(BaseModel):
    error: str
