"""Tag record model."""

from pydantic import Field

from app.db.base import Base, new_id


class Tag(Base):
    """
    Label applied to assets by name.

    Names are unique case-insensitively among tags. Tags cannot be
    renamed; they are only created and deleted.
    """

    id: str = Field(default_factory=new_id)
    name: str

    def matches(self, name: str) -> bool:
        """Case-insensitive name comparison used for uniqueness checks."""
        return self.name.casefold() == name.casefold()

    def __repr__(self) -> str:
        return f"<Tag(name={self.name})>"
