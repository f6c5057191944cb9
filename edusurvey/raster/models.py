import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class PageImage:
    """Encoded image of one document page."""

    data: bytes
    mime_type: str = "image/jpeg"

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def to_data_url(self) -> str:
        """Inline ``data:`` URL accepted by vision chat APIs."""
        return f"data:{self.mime_type};base64,{self.to_base64()}"
