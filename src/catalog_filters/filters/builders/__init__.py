"""Facet builders – one per facet type, registered in an ordered list."""
from catalog_filters.filters.builders.base import FacetBuilder, SingleFacetBuilder
from catalog_filters.filters.builders.catalog import (
    CategoryFacetBuilder,
    DynamicFacetBuilder,
    LoyaltyProgramFacetBuilder,
    PriceFacetBuilder,
    ProducerFacetBuilder,
    PromotionGoodsFacetBuilder,
    SellStatusFacetBuilder,
    SellerFacetBuilder,
    SeriesFacetBuilder,
    StateFacetBuilder,
    default_builders,
)

__all__ = [
    "CategoryFacetBuilder",
    "DynamicFacetBuilder",
    "FacetBuilder",
    "LoyaltyProgramFacetBuilder",
    "PriceFacetBuilder",
    "ProducerFacetBuilder",
    "PromotionGoodsFacetBuilder",
    "SellStatusFacetBuilder",
    "SellerFacetBuilder",
    "SeriesFacetBuilder",
    "SingleFacetBuilder",
    "StateFacetBuilder",
    "default_builders",
]
