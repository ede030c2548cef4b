"""
Page Object Model for the admin panel and storefront.

Page objects encapsulate locators and multi-step interactions so tests
read as workflows instead of selector soup.
"""

from uiflows.pages.base_page import BasePage

__all__ = ["BasePage"]
