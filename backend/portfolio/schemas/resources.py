"""
Portfolio Backend — Skill, Blog and Project Schemas
=====================================================

What:  Input bodies (`*Input`) and stored records (`*Record`) for the three
       portfolio resources.
Why:   Create and update take the same body: an update replaces every
       editable field, so there is no partial-update model.

Records:
    `_id` is the store's ObjectId rendered as a 24-character hex string.
    Editable fields are Optional on records because documents written by
    older clients may lack some of them; inputs require all of them. Fields
    a record model does not declare are passed through unchanged.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecordBase(BaseModel):
    """Common shape of a document read back from the store."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id", description="Store-assigned identifier (hex ObjectId)")

    @classmethod
    def from_document(cls, document: Dict[str, Any]):
        """Builds a record from a raw Mongo document, stringifying `_id`."""
        data = dict(document)
        data["_id"] = str(data["_id"])
        return cls.model_validate(data)


# ── Skills ────────────────────────────────────────────────────────────────

class SkillInput(BaseModel):
    title: str
    image: str = Field(description="Image URL")


class SkillRecord(RecordBase):
    title: Optional[str] = None
    image: Optional[str] = None


# ── Blogs ─────────────────────────────────────────────────────────────────

class BlogInput(BaseModel):
    title: str
    image: str
    description: str


class BlogRecord(RecordBase):
    title: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None


# ── Projects ──────────────────────────────────────────────────────────────

class ProjectInput(BaseModel):
    title: str
    description: str
    category: str
    technology: str
    link: str = Field(description="Live site or repository URL")


class ProjectRecord(RecordBase):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    technology: Optional[str] = None
    link: Optional[str] = None
