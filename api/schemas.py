# api/schemas.py

from datetime import date
from typing import Optional
from pydantic import BaseModel

class BookEditRequest(BaseModel):
    rating: Optional[float] = None
    tag: Optional[str] = None
    reading_state: Optional[str] = None
    initial_time: Optional[date] = None
    final_time: Optional[date] = None
