"""
JSON endpoints behind the sandbox admin panel.

Endpoints:
    GET    /api/health                - Health check
    GET    /api/categories            - List categories
    POST   /api/categories            - Create a category
    PUT    /api/categories/<id>       - Rename / update a category
    DELETE /api/categories/<id>       - Delete a category
    GET    /api/media?path=<folder>   - List a media library folder

Validation reports one error at a time, in form field order: name, slug,
image. This is the behavior the admin panel's Create form relies on.
"""

import logging
from functools import wraps

from flask import Blueprint, Response, jsonify, request, session
from sqlalchemy import or_, select

from sandbox import db
from sandbox.models import Category, list_media

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def admin_required(view):
    """Reject API calls without an admin session."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get("admin"):
            return jsonify({"error": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper


def validate_category_data(data: dict, require_image: bool = True) -> tuple[bool, str | None]:
    """
    Validate category data from request.

    Args:
        data: Dictionary containing category data.
        require_image: Whether an image path must be present.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not (data.get("name") or "").strip():
        return False, "Name is required."
    if not (data.get("slug") or "").strip():
        return False, "Slug is required."
    if require_image and not (data.get("image") or "").strip():
        return False, '"image" is not allowed to be empty'

    order = data.get("order")
    if order not in (None, ""):
        try:
            if int(order) < 0:
                return False, "Order must be a positive number."
        except (TypeError, ValueError):
            return False, "Order must be a positive number."

    return True, None


def find_conflict(name: str, slug: str, exclude_id: int | None = None) -> Category | None:
    """Return an existing category that already uses ``name`` or ``slug``."""
    stmt = select(Category).where(or_(Category.name == name, Category.slug == slug))
    if exclude_id is not None:
        stmt = stmt.where(Category.id != exclude_id)
    return db.session.scalars(stmt).first()


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint used to detect a started sandbox."""
    return jsonify({"status": "healthy"}), 200


@api_bp.route("/categories", methods=["GET"])
@admin_required
def get_categories() -> tuple[Response, int]:
    """List categories in creation order."""
    categories = db.session.scalars(select(Category).order_by(Category.id)).all()
    return jsonify({
        "categories": [category.to_dict() for category in categories],
        "count": len(categories)
    }), 200


@api_bp.route("/categories", methods=["POST"])
@admin_required
def create_category() -> tuple[Response, int]:
    """
    Create a new category.

    Request Body (JSON):
        name, slug, image (required); level, order (optional)

    Returns:
        201 with a confirmation message, 400 on the first validation error,
        409 when the name or slug is taken.
    """
    data = request.get_json(silent=True) or {}

    is_valid, error = validate_category_data(data)
    if not is_valid:
        logger.info(f"Rejected category: {error}")
        return jsonify({"error": error}), 400

    name = data["name"].strip()
    slug = data["slug"].strip()
    if find_conflict(name, slug):
        return jsonify({"error": "This category already exists"}), 409

    order = data.get("order")
    category = Category(
        name=name,
        slug=slug,
        image=data["image"].strip(),
        level=int(data.get("level") or 1),
        order=int(order) if order not in (None, "") else None,
        created_by=session.get("admin_name", "Admin"),
    )
    db.session.add(category)
    db.session.commit()
    logger.info(f"Created category {category.id}: {category.name}")

    return jsonify({"message": "Created successfully", "category": category.to_dict()}), 201


@api_bp.route("/categories/<int:category_id>", methods=["PUT"])
@admin_required
def update_category(category_id: int) -> tuple[Response, int]:
    """Update name and slug of an existing category."""
    category = db.session.get(Category, category_id)
    if not category:
        return jsonify({"error": "Category not found"}), 404

    data = request.get_json(silent=True) or {}
    data.setdefault("slug", category.slug)
    is_valid, error = validate_category_data(data, require_image=False)
    if not is_valid:
        return jsonify({"error": error}), 400

    name = data["name"].strip()
    slug = data["slug"].strip()
    if find_conflict(name, slug, exclude_id=category_id):
        return jsonify({"error": "This category already exists"}), 409

    category.name = name
    category.slug = slug
    db.session.commit()
    logger.info(f"Updated category {category_id}: {name}")

    return jsonify({"message": "Updated successfully", "category": category.to_dict()}), 200


@api_bp.route("/categories/<int:category_id>", methods=["DELETE"])
@admin_required
def delete_category(category_id: int) -> tuple[Response, int]:
    """Delete a category."""
    category = db.session.get(Category, category_id)
    if not category:
        return jsonify({"error": "Category not found"}), 404

    db.session.delete(category)
    db.session.commit()
    logger.info(f"Deleted category {category_id}")

    return jsonify({"message": "Deleted successfully"}), 200


@api_bp.route("/media", methods=["GET"])
@admin_required
def get_media() -> tuple[Response, int]:
    """List one folder of the media library."""
    path = request.args.get("path", "")
    entries = list_media(path)
    if entries is None:
        return jsonify({"error": "Folder not found"}), 404
    return jsonify({"path": path, "entries": entries}), 200
