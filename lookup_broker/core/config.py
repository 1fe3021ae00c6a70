import os
from pydantic import BaseModel

class Settings(BaseModel):
    # Basic
    ENV: str = os.getenv("ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Upstream credentials (absent => feature degrades, see LookupBroker)
    CENSUS_API_KEY: str | None = os.getenv("CENSUS_API_KEY")
    GEOCODIO_API_KEY: str | None = os.getenv("GEOCODIO_API_KEY")

    # Upstream endpoints
    NOMINATIM_BASE_URL: str = os.getenv("NOMINATIM_BASE_URL", "https://nominatim.openstreetmap.org")
    NOMINATIM_USER_AGENT: str = os.getenv("NOMINATIM_USER_AGENT", "HailSpectrum/1.0")
    CENSUS_BASE_URL: str = os.getenv("CENSUS_BASE_URL", "https://api.census.gov")
    CENSUS_DATASET: str = os.getenv("CENSUS_DATASET", "2020/dec/pl")
    CENSUS_POPULATION_VARIABLE: str = os.getenv("CENSUS_POPULATION_VARIABLE", "P1_001N")
    GEOCODIO_BASE_URL: str = os.getenv("GEOCODIO_BASE_URL", "https://api.geocod.io/v1.7")
    GEOCODIO_FIELDS: str = os.getenv("GEOCODIO_FIELDS", "cd")
    HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

    # Impact policy. A ZCTA is far larger than a storm footprint, so the raw
    # count is dampened; 0.3 is a calibration knob, not a measured ratio.
    POPULATION_SCALE: float = float(os.getenv("POPULATION_SCALE", "0.3"))
    DEFAULT_POPULATION: int = int(os.getenv("DEFAULT_POPULATION", "7383"))

    # CORS: exactly one origin is allowed
    ALLOW_ORIGIN: str = os.getenv("ALLOW_ORIGIN", "https://hailspectrum.com")

    # Meta routes; both off leaves only the two lookups
    HEALTH_ENABLED: bool = os.getenv("HEALTH_ENABLED", "true").lower() == "true"

    # Metrics
    PROMETHEUS_ENABLED: bool = os.getenv("PROMETHEUS_ENABLED", "true").lower() == "true"

settings = Settings()
