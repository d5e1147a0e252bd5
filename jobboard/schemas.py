from typing import List, Optional

from pydantic import BaseModel, Field


# =========================
# SINGLE JOB ROW
# =========================
class JobRow(BaseModel):
    title: str
    company: Optional[str] = None
    location: Optional[str] = None
    url: str = ""
    source: str
    posted_date: Optional[str] = None  # ISO string


# =========================
# RESPONSE SCHEMA
# =========================
class JobPage(BaseModel):
    items: List[JobRow]
    page: int = Field(..., ge=1)
    page_count: int = Field(..., ge=0)
    page_size: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    has_prev: bool
    has_next: bool
