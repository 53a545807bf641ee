"""Facet builders – one builder per catalog facet type."""
from __future__ import annotations

from collections.abc import Iterable

from catalog_filters.filters.builders.base import FacetBuilder, SingleFacetBuilder
from catalog_filters.filters.condition import Condition
from catalog_filters.filters.ports import Searcher
from catalog_filters.filters.values import Facet
from catalog_filters.kernel.errors import ConfigurationError


class PriceFacetBuilder(SingleFacetBuilder):
    # price ranges come from the searcher already in ascending order
    option_name = "price"
    option_title = "Price"
    with_auto_ranking = False
    disallow_auto_ranking = True


class CategoryFacetBuilder(SingleFacetBuilder):
    option_name = "category"
    option_title = "Category"


class ProducerFacetBuilder(SingleFacetBuilder):
    option_name = "producer"
    option_title = "Producer"


class SeriesFacetBuilder(SingleFacetBuilder):
    option_name = "series"
    option_title = "Series"


class SellerFacetBuilder(SingleFacetBuilder):
    option_name = "seller"
    option_title = "Seller"
    region_gated = True


class LoyaltyProgramFacetBuilder(SingleFacetBuilder):
    option_name = "loyalty_program"
    option_title = "Loyalty program"
    with_auto_ranking = False


class StateFacetBuilder(SingleFacetBuilder):
    option_name = "state"
    option_title = "State"
    with_auto_ranking = False


class PromotionGoodsFacetBuilder(SingleFacetBuilder):
    option_name = "promotion_goods"
    option_title = "Promotions"
    with_auto_ranking = False


class SellStatusFacetBuilder(SingleFacetBuilder):
    option_name = "sell_status"
    option_title = "Availability"
    with_auto_ranking = False


class DynamicFacetBuilder(FacetBuilder):
    """Attribute-driven facets: one facet per configured attribute key.

    Attributes listed in ``unranked`` keep the searcher's value order (sizes,
    volumes and other naturally ordered scales).
    """

    def __init__(self, attributes: Iterable[str] = (), *, unranked: Iterable[str] = ()) -> None:
        self._attributes = tuple(attributes)
        if len(set(self._attributes)) != len(self._attributes):
            raise ConfigurationError(
                "Dynamic attribute keys must be unique", detail={"attributes": list(self._attributes)}
            )
        self._unranked = frozenset(unranked)

    @property
    def name(self) -> str:
        return "dynamic"

    @property
    def attributes(self) -> tuple[str, ...]:
        return self._attributes

    def build(self, condition: Condition, searcher: Searcher, category_id: int) -> list[Facet]:
        facets: list[Facet] = []
        for attribute in self._attributes:
            values = searcher.count_values(condition, category_id, attribute)
            if not values:
                continue
            facets.append(
                Facet(
                    option_name=attribute,
                    values=tuple(values),
                    disallow_auto_ranking=attribute in self._unranked,
                )
            )
        return facets


def default_builders(
    attributes: Iterable[str] = (), *, unranked_attributes: Iterable[str] = ()
) -> list[FacetBuilder]:
    """Return the catalog builders in registration order."""
    return [
        DynamicFacetBuilder(attributes, unranked=unranked_attributes),
        CategoryFacetBuilder(),
        PriceFacetBuilder(),
        ProducerFacetBuilder(),
        SeriesFacetBuilder(),
        SellerFacetBuilder(),
        LoyaltyProgramFacetBuilder(),
        StateFacetBuilder(),
        PromotionGoodsFacetBuilder(),
        SellStatusFacetBuilder(),
    ]


__all__ = [
    "CategoryFacetBuilder",
    "DynamicFacetBuilder",
    "LoyaltyProgramFacetBuilder",
    "PriceFacetBuilder",
    "ProducerFacetBuilder",
    "PromotionGoodsFacetBuilder",
    "SellStatusFacetBuilder",
    "SellerFacetBuilder",
    "SeriesFacetBuilder",
    "StateFacetBuilder",
    "default_builders",
]
