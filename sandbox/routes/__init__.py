"""
Routes package for the sandbox application.

This package contains route blueprints:
- api: JSON endpoints used by the admin panel scripts
- views: HTML pages for the admin panel and storefront
"""
