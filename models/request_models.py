"""
API Request Models

Pydantic models for API request validation.
"""
from typing import List, Optional, Union
from pydantic import BaseModel, Field


class DisplayCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)
    character_set: Optional[Union[str, List[str]]] = None  # preset name (str) or explicit symbols (list), None = numeric
    alphabet: Optional[str] = None  # explicit symbols as one string, e.g. " ABC"; exclusive with character_set
    min_width: int = 5
    pad_direction: str = "left"  # "left" or "right"
    step_interval_ms: int = 200
    initial_value: str = ""


class TargetRequest(BaseModel):
    value: str
