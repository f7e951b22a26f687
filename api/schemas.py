from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class DashboardSelectionModel(BaseModel):
    column: Optional[str] = None


class MetaColumnsResponse(BaseModel):
    columns: List[str]
