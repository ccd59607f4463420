"""Plan Catalog: static pricing plans, built once at import and never mutated."""

from launchpad.core.errors import NotFoundError
from launchpad.schemas.plan import Plan

PLANS: tuple[Plan, ...] = (
    Plan(
        id="essential",
        name="Essential",
        description=(
            "Includes basic maintenance request management, photo uploads, and status "
            "tracking for up to 3 active listings."
        ),
        monthly_price=99,
        hours="Up to 2 hours of repairs/touch-ups",
        features=(
            "Up to 3 active listings",
            "Basic maintenance request management",
            "Photo uploads",
            "Status tracking",
            "Up to 2 hours of repairs/touch-ups",
            "Email support",
            "48-hour response time",
        ),
    ),
    Plan(
        id="pro",
        name="Pro",
        description=(
            "Includes all Essential features plus priority scheduling, unlimited active "
            "listings, and direct messaging with the admin team for faster response."
        ),
        monthly_price=199,
        hours="Up to 5 hours including painting and fixture installs",
        features=(
            "All Essential features",
            "Unlimited active listings",
            "Priority scheduling",
            "Direct messaging with admin team",
            "Up to 5 hours including painting and fixture installs",
            "Faster response times",
            "Phone & email support",
            "24-hour response time",
        ),
        popular=True,
    ),
    Plan(
        id="concierge",
        name="Concierge",
        description=(
            "Includes all Pro features plus custom make-ready coordination, on-site visit "
            "scheduling, and 24/7 request support for high-end listings."
        ),
        monthly_price=299,
        hours="Up to 10 hours with full project coordination and staging assistance",
        features=(
            "All Pro features",
            "Custom make-ready coordination",
            "On-site visit scheduling",
            "24/7 request support",
            "Up to 10 hours with full project coordination",
            "Staging assistance",
            "Dedicated account manager",
            "Full photo & video documentation",
            "Weekend & emergency service",
        ),
    ),
)


class PlanCatalog:
    """Read-only view over the seeded plans. No authorization required."""

    def __init__(self, plans: tuple[Plan, ...] = PLANS):
        self._plans = plans
        self._by_id = {plan.id: plan for plan in plans}

    def list_plans(self) -> list[Plan]:
        return list(self._plans)

    def get_plan(self, plan_id: str) -> Plan:
        plan = self._by_id.get(plan_id)
        if plan is None:
            raise NotFoundError("Plan not found")
        return plan
