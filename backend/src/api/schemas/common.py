from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class OperationStatus(BaseModel):
    status: Literal["idle", "pending", "success", "failed"]
    is_loading: bool
    error: str | None = None
