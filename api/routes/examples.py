"""Catalog routes: list, describe and run examples"""

from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_service
from domain.enums import PatternGroup
from domain.schemas import ExampleInfo, ExampleRunResponse
from services import CatalogService

router = APIRouter(prefix="/examples", tags=["Examples"])
logger = logging.getLogger("patterns.api.examples")


@router.get("", response_model=List[ExampleInfo])
def list_examples(
    group: Optional[PatternGroup] = Query(None, description="Filter by pattern group"),
    service: CatalogService = Depends(get_catalog_service),
):
    """List catalog examples, optionally for one pattern group"""
    entries = service.list_examples(group)
    return [ExampleInfo.model_validate(e) for e in entries]


@router.get("/{slug}", response_model=ExampleInfo)
def get_example(slug: str, service: CatalogService = Depends(get_catalog_service)):
    """Describe one example"""
    return ExampleInfo.model_validate(service.get_example(slug))


@router.post("/{slug}/run", response_model=ExampleRunResponse)
def run_example(slug: str, service: CatalogService = Depends(get_catalog_service)):
    """Run an example and return its console output"""
    logger.info(f"run_requested slug={slug}")
    output = service.run_example(slug)
    return ExampleRunResponse(slug=slug, output=output)
