"""
Database models and static catalog data for the sandbox.

Categories are persisted (they are created, edited and deleted through the
admin UI); storefront content is read-only and kept as constants.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from faker import Faker

from sandbox import db


class CategoryStatus(str, Enum):
    """Enumeration of category statuses."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Category(db.Model):
    """
    Product category managed from the admin panel.

    Attributes:
        id: Unique identifier.
        name: Display name; unique.
        slug: URL slug; unique.
        image: Media path chosen through the file manager.
        level: Nesting level (1 for top-level categories).
        parent: Name of the parent category, if any.
        order: Optional display order.
        status: Active or inactive.
        created_by: Name of the admin who created the category.
    """

    __tablename__ = "categories"

    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(120), nullable=False, unique=True)
    slug: str = db.Column(db.String(120), nullable=False, unique=True)
    image: str = db.Column(db.String(255), nullable=False)
    level: int = db.Column(db.Integer, nullable=False, default=1)
    parent: str | None = db.Column(db.String(120), nullable=True)
    order: int | None = db.Column(db.Integer, nullable=True)
    status: str = db.Column(db.String(20), nullable=False, default=CategoryStatus.ACTIVE.value)
    created_by: str = db.Column(db.String(120), nullable=False)
    created_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )
    updated_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )

    @staticmethod
    def _display_date(value: datetime | None) -> str:
        return value.strftime("%d %b %Y") if value else "-"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the category the way the admin grid displays it."""
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "image": self.image,
            "level": self.level,
            "parent": self.parent or "-",
            "order": self.order,
            "status": self.status,
            "created_by": self.created_by,
            "created_at": self._display_date(self.created_at),
            "updated_at": self._display_date(self.updated_at),
        }

    def __repr__(self) -> str:
        return f"<Category {self.id}: {self.name}>"


# -----------------------------------------------------------------------------
# Media library shown by the file manager
# -----------------------------------------------------------------------------

MEDIA_LIBRARY: dict[str, Any] = {
    "catalog-media": {
        "poultry": ["whole-chicken.svg", "chicken-curry-cut.svg", "chicken-wings.svg"],
        "mutton": ["mutton-curry-cut.svg", "mutton-keema.svg"],
        "seafood": ["prawns.svg"],
    },
    "banner": ["egg-web.svg", "mutton-web.svg", "chicken-web.svg"],
}


def list_media(path: str) -> list[dict[str, str]] | None:
    """
    List a folder of the media library.

    Args:
        path: Slash-separated folder path; empty for the root.

    Returns:
        Entries as ``{"name", "kind"}`` dicts, or None if the path is not a folder.
    """
    node: Any = MEDIA_LIBRARY
    for part in [p for p in path.split("/") if p]:
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    if isinstance(node, dict):
        return [{"name": name, "kind": "folder"} for name in node]
    return [{"name": name, "kind": "file"} for name in node]


# -----------------------------------------------------------------------------
# Seed data
# -----------------------------------------------------------------------------

SEED_CATEGORIES = [
    {"name": "Chicken", "slug": "chicken", "image": "catalog-media/poultry/whole-chicken.svg", "order": 1},
    {"name": "Mutton", "slug": "mutton", "image": "catalog-media/mutton/mutton-curry-cut.svg", "order": 2},
    {"name": "Seafood", "slug": "seafood", "image": "catalog-media/seafood/prawns.svg", "order": 3},
    {"name": "Chicken Curry Cut", "slug": "chicken-curry-cut", "image": "catalog-media/poultry/chicken-curry-cut.svg",
     "level": 2, "parent": "Chicken"},
]


def seed_categories(seed: int) -> None:
    """Insert the starting categories with deterministic creator names."""
    fake = Faker()
    Faker.seed(seed)
    for values in SEED_CATEGORIES:
        db.session.add(Category(created_by=fake.name(), **values))
    db.session.commit()
