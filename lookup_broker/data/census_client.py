import httpx
from .base import PopulationClient, Document
from .http import fetch_json
from ..core.config import Settings

class CensusPopulation(PopulationClient):
    """
    US Census Data API, queried per ZIP code tabulation area.
    Returns the raw table: [["P1_001N", "NAME", "zip code tabulation area"],
    ["41500", "ZCTA5 76102", "76102"]].
    """
    name = "census"

    def __init__(self, base_url: str, dataset: str, variable: str, api_key: str,
                 timeout: float = 10, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.dataset = dataset.strip("/")
        self.variable = variable
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    async def zcta_population(self, zip_code: str) -> Document:
        return await fetch_json(
            self.name,
            f"{self.base_url}/data/{self.dataset}",
            params={
                "get": f"{self.variable},NAME",
                "for": f"zip code tabulation area:{zip_code}",
                "key": self.api_key,
            },
            timeout=self.timeout,
            transport=self.transport,
        )

def population_client(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> PopulationClient | None:
    """
    None when no key is configured; callers skip the population step.
    """
    if not settings.CENSUS_API_KEY:
        return None
    return CensusPopulation(
        settings.CENSUS_BASE_URL,
        settings.CENSUS_DATASET,
        settings.CENSUS_POPULATION_VARIABLE,
        settings.CENSUS_API_KEY,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        transport=transport,
    )
