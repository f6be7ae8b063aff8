from typing import Optional, Dict, Any
from pydantic import BaseModel

from .. import __version__


class GeneratorInfo(BaseModel):
    name: str
    description: Optional[str] = None
    config_schema: Dict[str, Any]


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = __version__
    generators_available: int = 0
