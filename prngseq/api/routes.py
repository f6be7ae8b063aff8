import inspect
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import ValidationError

from .models import GeneratorInfo, HealthResponse
from ..core.output import iter_lines
from ..core.registry import PluginRegistry
from ..errors import UnknownGeneratorError

logger = logging.getLogger(__name__)

router = APIRouter()

# Upper bound on values per streamed request.
MAX_STREAM_COUNT = 1_000_000


@router.get("/", response_model=HealthResponse)
async def health_check():
    generators_count = len(PluginRegistry.list_generators())
    return HealthResponse(generators_available=generators_count)


@router.get("/generators", response_model=List[GeneratorInfo])
async def list_generators():
    generators_info = []

    for name in PluginRegistry.list_generators():
        generator_class = PluginRegistry.get_generator(name)
        if generator_class:
            generators_info.append(GeneratorInfo(
                name=name,
                description=inspect.getdoc(generator_class),
                config_schema=generator_class.config_class.model_json_schema()
            ))

    return generators_info


@router.post("/sequence/{generator_name}")
def stream_sequence(generator_name: str, payload: Optional[Dict[str, Any]] = Body(default=None)):
    # The body schema depends on the generator, so it is validated here.
    try:
        config_class = PluginRegistry.config_class(generator_name)
    except UnknownGeneratorError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        config = config_class(**(payload or {}))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False, include_input=False))

    if config.count > MAX_STREAM_COUNT:
        raise HTTPException(
            status_code=422,
            detail=f"count must be <= {MAX_STREAM_COUNT} for streamed sequences",
        )

    generator = PluginRegistry.create_generator(generator_name, config)
    logger.info("Streaming %d values from %s", config.count, generator_name)

    return StreamingResponse(
        iter_lines(generator),
        media_type="text/csv",
        headers={"Cache-Control": "no-cache"}
    )
