"""
HTML view routes for the sandbox admin panel and storefront.

Routes:
    GET/POST /login                    - Admin login form
    GET  /logout                       - End the admin session
    GET  /dashboard                    - Admin landing page
    GET  /categories                   - Category management page
    GET  /home                         - Storefront home page
    GET  /search?q=<term>              - Storefront search results
    GET  /product/?category_slugs=<s>  - Products of a category
    GET  /product-detail/<slug>        - Product detail page
    GET  /media/<path>                 - Generated placeholder images
"""

import logging
from functools import wraps
from html import escape

from flask import (
    Blueprint, Response, abort, current_app, redirect, render_template, request, session, url_for,
)
from sqlalchemy import select

from sandbox import db
from sandbox.catalog import (
    BANNERS, DEALS, HOME_CATEGORIES, MASALAS, PRODUCT_TABS, PRODUCTS, find_product, search_products,
)
from sandbox.models import Category

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)

SIDEBAR_ITEMS = [
    ("Dashboard", "views.dashboard"),
    ("Category", "views.categories"),
    ("Product", None),
    ("Banner", None),
    ("Hub", None),
    ("Employee's", None),
    ("Customer", None),
    ("Order", None),
    ("Address", None),
    ("Inventory", None),
]


def login_required(view):
    """Redirect to the login page when there is no admin session."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get("admin"):
            return redirect(url_for("views.login"))
        return view(*args, **kwargs)

    return wrapper


def render_admin(template: str, **context):
    """Render an admin page with the sidebar, honoring ``?hide=<item>``."""
    hidden = set(request.args.getlist("hide"))
    items = [(label, endpoint) for label, endpoint in SIDEBAR_ITEMS if label not in hidden]
    return render_template(template, sidebar_items=items, **context)


def media_base() -> str:
    """Absolute prefix for media URLs, as the storefront serves them from a CDN host."""
    return request.host_url.rstrip("/") + "/media/"


# -----------------------------------------------------------------------------
# Admin panel
# -----------------------------------------------------------------------------

@views_bp.route("/")
def index():
    return redirect(url_for("views.login"))


@views_bp.route("/login", methods=["GET", "POST"])
def login():
    """Render the login form and authenticate submitted credentials."""
    error = None
    if request.method == "POST":
        username = request.form.get("username", "").strip()
        password = request.form.get("password", "")
        if (
            username == current_app.config["ADMIN_USERNAME"]
            and password == current_app.config["ADMIN_PASSWORD"]
        ):
            session["admin"] = True
            session["admin_name"] = "Sandbox Admin"
            logger.info("Admin logged in")
            return redirect(url_for("views.dashboard"))
        error = "Invalid mobile number or password"
        logger.info("Rejected login attempt")
    return render_template("login.html", error=error)


@views_bp.route("/logout")
def logout():
    session.clear()
    return redirect(url_for("views.login"))


@views_bp.route("/dashboard")
@login_required
def dashboard():
    return render_admin("dashboard.html")


@views_bp.route("/categories")
@login_required
def categories():
    rows = db.session.scalars(select(Category).order_by(Category.id)).all()
    return render_admin("categories.html", categories=[row.to_dict() for row in rows])


# -----------------------------------------------------------------------------
# Storefront
# -----------------------------------------------------------------------------

@views_bp.route("/home")
def home():
    return render_template(
        "home.html",
        banners=BANNERS,
        categories=HOME_CATEGORIES,
        tabs=PRODUCT_TABS,
        products=PRODUCTS,
        deals=DEALS,
        masalas=MASALAS,
        media_base=media_base(),
    )


@views_bp.route("/search")
def search():
    query = request.args.get("q", "")
    return render_template(
        "search.html", query=query, results=search_products(query), media_base=media_base()
    )


@views_bp.route("/product/")
def product_list():
    slug = request.args.get("category_slugs", "")
    products = [p for p in PRODUCTS if p["tab"].lower() == slug.lower()]
    return render_template("product_list.html", slug=slug, products=products, media_base=media_base())


@views_bp.route("/product-detail/<slug>")
def product_detail(slug: str):
    product = find_product(slug)
    if product is None:
        abort(404)
    return render_template("product_detail.html", product=product, media_base=media_base())


@views_bp.route("/media/<path:filename>")
def media(filename: str) -> Response:
    """
    Serve a generated SVG placeholder for any media path.

    Banners are wide; everything else is a 200x200 tile so natural-size
    checks have real dimensions to read.
    """
    if not filename.endswith(".svg"):
        abort(404)
    width, height = (1200, 400) if filename.startswith("banner/") else (200, 200)
    label = escape(filename.rsplit("/", 1)[-1].removesuffix(".svg"))
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
        f'<rect width="100%" height="100%" fill="#e8f5e9"/>'
        f'<text x="50%" y="50%" text-anchor="middle" font-size="20" fill="#2e7d32">{label}</text>'
        f"</svg>"
    )
    return Response(svg, mimetype="image/svg+xml")
