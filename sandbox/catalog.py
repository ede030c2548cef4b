"""Read-only storefront content served by the sandbox home page."""

from typing import Any

BANNERS: list[dict[str, str]] = [
    {"image": "banner/egg-web.svg", "category": "eggs"},
    {"image": "banner/mutton-web.svg", "category": "mutton"},
    {"image": "banner/chicken-web.svg", "category": "chicken"},
    {"image": "banner/seafood-web.svg", "category": "seafood"},
    {"image": "banner/masala-web.svg", "category": "masalas"},
]

HOME_CATEGORIES: list[dict[str, str]] = [
    {"name": "Chicken", "slug": "chicken"},
    {"name": "Mutton", "slug": "mutton"},
    {"name": "Seafood", "slug": "seafood"},
    {"name": "Eggs", "slug": "eggs"},
    {"name": "Bones", "slug": "bones"},
    {"name": "Masalas", "slug": "masalas"},
]

# Discounts are what the storefront displays: round half up of
# (original - price) / original * 100.
PRODUCTS: list[dict[str, Any]] = [
    {"name": "Whole Chicken without Skin", "slug": "whole-chicken-without-skin", "tab": "Chicken",
     "description": "Farm fresh, cleaned | 1kg", "price": "₹249", "original": "₹299", "discount": "17% off"},
    {"name": "Chicken Curry Cut", "slug": "chicken-curry-cut", "tab": "Chicken",
     "description": "Bone-in pieces | 500g", "price": "₹199", "original": "₹249", "discount": "20% off"},
    {"name": "Chicken Breast Boneless", "slug": "chicken-breast-boneless", "tab": "Chicken",
     "description": "Lean boneless breast | 500g", "price": "₹329", "original": "₹379", "discount": "13% off"},
    {"name": "Mutton Curry Cut", "slug": "mutton-curry-cut", "tab": "Mutton",
     "description": "Tender goat meat | 1kg", "price": "₹749", "original": "₹899", "discount": "17% off"},
    {"name": "Mutton Keema", "slug": "mutton-keema", "tab": "Mutton",
     "description": "Fine minced mutton | 1kg", "price": "₹1,099", "original": "₹1,299", "discount": "15% off"},
    {"name": "Prawns Medium", "slug": "prawns-medium", "tab": "Seafood",
     "description": "Deveined prawns | 250g", "price": "₹449", "original": "₹499", "discount": "10% off"},
    {"name": "Farm Eggs", "slug": "farm-eggs", "tab": "Eggs",
     "description": "Brown eggs | 12 pcs", "price": "₹96", "original": "₹120", "discount": "20% off"},
    {"name": "Chicken Bones", "slug": "chicken-bones", "tab": "Bones",
     "description": "For soups and stock | 500g", "price": "₹99", "original": "₹120", "discount": "18% off"},
    {"name": "Mutton Bones", "slug": "mutton-bones", "tab": "Bones",
     "description": "For paya and broth | 500g", "price": "₹149.50", "original": "₹199", "discount": "25% off"},
]

PRODUCT_TABS: list[str] = ["Chicken", "Mutton", "Seafood", "Eggs", "Bones"]

DEALS: list[dict[str, Any]] = [
    {
        "title": "Family Chicken Combo",
        "image": "deals/chicken-combo.svg",
        "labels": ["Best Seller", "Combo"],
        "lines": ["Whole Chicken without Skin 1kg - ₹249", "Chicken Curry Cut 500g - ₹199"],
    },
    {
        "title": "Mutton Feast",
        "image": "deals/mutton-feast.svg",
        "labels": ["Premium"],
        "lines": ["Mutton Curry Cut 1kg - ₹749", "Mutton Keema 500g - ₹549"],
    },
]

MASALAS: list[dict[str, Any]] = [
    {"name": "Chicken Masala", "description": "Aromatic curry blend | 100g",
     "price": "₹45", "original": "₹50", "discount": "10% off"},
    {"name": "Turmeric Powder", "description": "Pure haldi | 200g",
     "price": "₹60", "original": "₹80", "discount": "25% off"},
    {"name": "Chilli Powder", "description": "Hot and bright | 100g",
     "price": "₹40", "original": None, "discount": None},
    {"name": "Chicken Briyani Masala", "description": "Dum biryani spice mix | 50g",
     "price": "₹35", "original": "₹39", "discount": "10% off"},
]


def search_products(query: str) -> list[dict[str, Any]]:
    """Case-insensitive substring search over product names."""
    needle = query.strip().lower()
    if not needle:
        return []
    return [product for product in PRODUCTS if needle in product["name"].lower()]


def find_product(slug: str) -> dict[str, Any] | None:
    return next((product for product in PRODUCTS if product["slug"] == slug), None)
