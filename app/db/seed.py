"""
Sample catalog used to populate an empty store on first start.
"""

from datetime import datetime, timedelta

from app.db.base import utcnow
from app.models import Asset, CatalogDocument, Collection, Dimensions, Tag

SAMPLE_TAGS = [
    "Nature",
    "Technology",
    "Architecture",
    "People",
    "Business",
    "Travel",
    "Food",
    "Fashion",
    "Abstract",
    "Wildlife",
]

SAMPLE_COLLECTIONS = [
    ("Marketing Assets", "Assets for marketing campaigns", "2024-01-15"),
    ("Product Photography", "Product images for e-commerce", "2024-02-20"),
    ("Brand Guidelines", "Brand identity and guidelines", "2024-03-10"),
]

# (title, description, tags, picsum id, copyright, usage rights, collection index, size)
SAMPLE_ASSETS = [
    ("Mountain Landscape", "Beautiful mountain landscape at sunset", ["Nature", "Travel"],
     1018, "Free to use", "Commercial use allowed", 0, 2_457_600),
    ("Modern Office Space", "Contemporary office interior design", ["Business", "Architecture"],
     1015, "© 2024 Company", "Internal use only", 1, 1_843_200),
    ("Technology Workspace", "Laptop and workspace setup", ["Technology", "Business"],
     0, "Creative Commons", "Attribution required", 0, 987_136),
    ("Urban Architecture", "Modern city building facade", ["Architecture", "Abstract"],
     1080, "Free to use", "Commercial use allowed", 2, 3_145_728),
    ("Nature Wildlife", "Wildlife in natural habitat", ["Nature", "Wildlife"],
     1084, "© 2024 Photographer", "Editorial use only", 2, 1_310_720),
]


def build_sample_document(now: datetime | None = None) -> CatalogDocument:
    """Build the sample catalog, with upload dates spread over the last weeks."""
    now = now or utcnow()

    tags = [Tag(name=name) for name in SAMPLE_TAGS]
    collections = [
        Collection(
            name=name,
            description=description,
            created_at=datetime.fromisoformat(created).replace(tzinfo=now.tzinfo),
        )
        for name, description, created in SAMPLE_COLLECTIONS
    ]

    assets = []
    for index, (title, description, asset_tags, picsum_id, copyright, rights, coll, size) in enumerate(
        SAMPLE_ASSETS
    ):
        assets.append(
            Asset(
                title=title,
                description=description,
                tags=list(asset_tags),
                image_url=f"https://picsum.photos/id/{picsum_id}/1920/1080",
                copyright=copyright,
                usage_rights=rights,
                collection_id=collections[coll].id,
                file_name=f"image-{index + 1}.jpg",
                file_size=size,
                dimensions=Dimensions(width=1920, height=1080),
                format="JPEG",
                upload_date=now - timedelta(days=7 * (len(SAMPLE_ASSETS) - index)),
                updated_at=now,
            )
        )

    return CatalogDocument(assets=assets, collections=collections, tags=tags)
