"""Request configuration models."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class ResourceMethods:
    """API method names and id parameter for a resource type."""

    get: str
    search: str
    id_parameter: str


class Resource(Enum):
    """Resource types exposed by the API."""

    FOOD = ResourceMethods("food.get", "foods.search", "food_id")
    RECIPE = ResourceMethods("recipe.get", "recipes.search", "recipe_id")


AUTOCOMPLETE_METHOD = "foods.autocomplete"


@dataclass(frozen=True)
class RequestConfig:
    """Method name and call-specific parameters for one API request."""

    method: str
    params: dict[str, object] = field(default_factory=dict)
