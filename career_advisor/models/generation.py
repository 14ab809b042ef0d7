"""
Sampling parameters sent with each model call
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class GenerationConfig(BaseModel):
    """Provider-neutral generation parameters"""
    temperature: Optional[float] = Field(default=None, ge=0, le=2)
    top_p: Optional[float] = Field(default=None, ge=0, le=1)
    top_k: Optional[int] = Field(default=None, gt=0)
    max_output_tokens: Optional[int] = Field(default=None, gt=0)
    stop_sequences: Optional[List[str]] = None
