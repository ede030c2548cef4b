"""Customer-facing storefront page objects."""

from uiflows.pages.storefront.banner import BannerCarousel
from uiflows.pages.storefront.catalog import CategoryGrid, ProductCard, ProductCatalog
from uiflows.pages.storefront.deals import AddOnMasalas, FeaturedDeals
from uiflows.pages.storefront.home_page import StorefrontHomePage

__all__ = [
    "AddOnMasalas",
    "BannerCarousel",
    "CategoryGrid",
    "FeaturedDeals",
    "ProductCard",
    "ProductCatalog",
    "StorefrontHomePage",
]
