from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific vision AI clients."""

    @abstractmethod
    async def create_vision_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        image_url: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return provider response as plain text."""
