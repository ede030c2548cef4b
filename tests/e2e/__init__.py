"""
Live end-to-end tests for the admin panel and storefront.

These tests run the uiflows workflows against the deployed application and
are skipped unless credentials are configured and the site is reachable.
"""
