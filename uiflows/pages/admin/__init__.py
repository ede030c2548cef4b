"""Admin back-office page objects."""

from uiflows.pages.admin.category_form import CategoryForm
from uiflows.pages.admin.category_page import CategoryPage
from uiflows.pages.admin.login_page import LoginPage
from uiflows.pages.admin.sidebar import SidebarMenu

__all__ = ["CategoryForm", "CategoryPage", "LoginPage", "SidebarMenu"]
