"""Request bodies accepted by the web API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateSDKInput(BaseModel):
    """Body of ``POST /generate``.

    Required fields default to None so that missing values surface as a
    "Missing required fields" error from the orchestrator rather than a schema error.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    documentation: Optional[str] = None
    language: Optional[str] = None
    ai_provider: Optional[str] = Field(default=None, alias="aiProvider")
    model: Optional[str] = None
    minify: bool = False
    use_chunking: bool = Field(default=False, alias="useChunking")
    session_id: Optional[str] = Field(default=None, alias="sessionId")


class ProgressUpdateInput(BaseModel):
    """Body of ``POST /progress``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    current: int = 0
    total: int = 0
    status: str = "processing"


class ClientLogEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    level: str
    message: str = ""
    meta: Optional[Dict[str, Any]] = None
    source: Optional[str] = None


class ClientLogsInput(BaseModel):
    """Body of ``POST /logs``: log entries forwarded by the browser client."""

    model_config = ConfigDict(extra="ignore")

    logs: List[ClientLogEntry]
