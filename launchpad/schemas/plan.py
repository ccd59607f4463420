"""Plan catalog schemas."""

from pydantic import BaseModel, ConfigDict


class Plan(BaseModel):
    """A pricing plan. Frozen: the catalog is immutable at runtime."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    monthly_price: int
    hours: str
    features: tuple[str, ...]
    popular: bool = False
