"""Progress state models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ProgressStatus(str, Enum):
    IDLE = "idle"
    INITIALIZING = "initializing"
    PROCESSING = "processing"
    COMPLETE = "complete"


class ProgressState(BaseModel):
    """Progress of one generation session: ``current`` of ``total`` steps."""

    model_config = ConfigDict(frozen=True, use_enum_values=True, validate_default=True)

    current: int = 0
    total: int = 0
    status: ProgressStatus = ProgressStatus.IDLE
