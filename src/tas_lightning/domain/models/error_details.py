"""Error details domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Error payload returned to callers, including the HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.reason}
