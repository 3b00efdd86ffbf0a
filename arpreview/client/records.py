"""Wire records returned by the REST API."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CatalogItem:
    """A 3D product model as the API returns it."""
    id: str
    name: str
    category: str
    model_url: str
    thumbnail: str
    description: Optional[str] = None
    scale: float = 1.0
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogItem":
        """Create from an API record."""
        return cls(
            id=str(data["_id"]),
            name=data["name"],
            category=data["category"],
            model_url=data["modelUrl"],
            thumbnail=data["thumbnail"],
            description=data.get("description"),
            scale=float(data.get("scale") or 1.0),
            created_at=data.get("createdAt"),
        )
