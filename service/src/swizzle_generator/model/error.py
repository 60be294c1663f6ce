from pydantic import BaseModel


class Error(BaseModel):
    error: str
    kind: str | None = None

    @staticmethod
    def from_except(e: Exception) -> "Error":
        return Error(error=str(e), kind=type(e).__name__)
