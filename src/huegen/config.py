from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

class GeneratorSettings(BaseModel):
    # Minimum RGB distance from the background for a color to count as dissimilar
    threshold: float = Field(default=100.0, ge=0)
    # Total draws allowed before the background-avoiding generator tops up
    max_attempts: int = Field(default=1000, ge=0)
    # None keeps the avoid-list loop unbounded
    avoid_list_max_attempts: Optional[int] = Field(default=None, ge=1)
