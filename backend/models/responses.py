from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False
    roles: int = 0


class FairnessResponse(BaseModel):
    disclaimer: str
