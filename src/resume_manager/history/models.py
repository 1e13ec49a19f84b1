"""Run history data models."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class GenerationRun(BaseModel):
    """One ``generate`` invocation."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    company_name: str
    doc_types: list[str] = Field(default_factory=list)
    theme: str | None = None
    files: list[str] = Field(default_factory=list)
    elapsed_seconds: float = 0.0
    success: bool = True
    error_message: str | None = None
