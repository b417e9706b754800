# stockflow/db/seed.py
import logging
from sqlmodel import Session, select

from .models import Sector

logger = logging.getLogger(__name__)

DEFAULT_SECTORS = [
    {"name": "Electronics", "description": "Electronic devices and gadgets", "icon": "📱"},
    {"name": "Clothing", "description": "Apparel and fashion items", "icon": "👕"},
    {"name": "Food & Beverages", "description": "Food items and drinks", "icon": "🍎"},
    {"name": "Home & Garden", "description": "Home improvement and garden supplies", "icon": "🏠"},
    {"name": "Health & Beauty", "description": "Healthcare and cosmetic products", "icon": "💄"},
    {"name": "Books & Media", "description": "Books, movies, and educational content", "icon": "📚"},
    {"name": "Sports & Outdoors", "description": "Athletic and outdoor equipment", "icon": "⚽"},
    {"name": "Automotive", "description": "Car parts and accessories", "icon": "🚗"},
    {"name": "Toys & Games", "description": "Children toys and entertainment", "icon": "🧸"},
    {"name": "Office Supplies", "description": "Business and office equipment", "icon": "📎"},
]

def seed_sectors(session: Session) -> int:
    """Insert the predefined sectors that are not present yet. Returns the number added."""
    existing = set(session.exec(select(Sector.name)).all())
    added = 0
    for sector in DEFAULT_SECTORS:
        if sector["name"] in existing:
            continue
        session.add(Sector(**sector))
        added += 1
    if added:
        session.commit()
        logger.info(f"Seeded {added} sectors")
    return added
