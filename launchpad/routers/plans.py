"""Plans router - static pricing catalog."""

from typing import List

from fastapi import APIRouter

from launchpad.schemas.plan import Plan
from launchpad.services.plans import PlanCatalog

router = APIRouter(prefix="/plans", tags=["plans"])

catalog = PlanCatalog()


@router.get("", response_model=List[Plan])
async def list_plans():
    """List all plans."""
    return catalog.list_plans()


@router.get("/{plan_id}", response_model=Plan)
async def get_plan(plan_id: str):
    """Get a plan by ID."""
    return catalog.get_plan(plan_id)
