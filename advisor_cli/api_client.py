"""
HTTP client for all API interactions
"""
import httpx
from advisor_cli.models import (
    ChatRequest,
    ChatResponse,
    HealthResponse,
    LearningPathRequest,
    LearningPathResponse,
)
from advisor_cli.config import Config


class APIClient:
    """Client for interacting with the Career Advisor API"""

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport = None):
        self.base_url = config.api_base_url.rstrip("/")
        self.timeout = config.api_timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """Send a chat message with the local conversation history"""
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/api/chat", json=request.model_dump(by_alias=True)
            )
            response.raise_for_status()
            return ChatResponse(**response.json())

    async def learning_path(self, request: LearningPathRequest) -> LearningPathResponse:
        """Request a learning roadmap"""
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/api/learning-path",
                json=request.model_dump(by_alias=True, exclude_none=True),
            )
            response.raise_for_status()
            return LearningPathResponse(**response.json())

    async def health(self) -> HealthResponse:
        """Check the server is up"""
        async with self._client() as client:
            response = await client.get(f"{self.base_url}/health")
            response.raise_for_status()
            return HealthResponse(**response.json())
