"""
MongoDB Service - helpers shared by the collection services.

- ObjectId <-> string conversion for JSON responses
- Reference population (the job -> company, application -> applicant joins)
"""

from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from bson import ObjectId
from pymongo.collection import Collection


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: Any) -> Any:
    """Convert a MongoDB document (nested dicts/lists included) to a JSON-serializable value."""
    if doc is None:
        return None
    if isinstance(doc, ObjectId):
        return str(doc)
    if isinstance(doc, dict):
        return {key: serialize_doc(value) for key, value in doc.items()}
    if isinstance(doc, list):
        return [serialize_doc(item) for item in doc]
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse a 24-hex id. Returns None for anything that is not a valid ObjectId."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================
# POPULATION
# Replace reference ids with the referenced documents
# ============================================================

def populate(
    docs: List[dict],
    field: str,
    collection: Collection,
    projection: Optional[Dict[str, int]] = None
) -> List[dict]:
    """
    Replace `doc[field]` (a single ObjectId) with the referenced document.

    One `$in` query for the whole batch. Dangling references become None.
    """
    ids = {doc[field] for doc in docs if isinstance(doc.get(field), ObjectId)}
    if not ids:
        return docs

    found = {ref["_id"]: ref for ref in collection.find({"_id": {"$in": list(ids)}}, projection)}
    for doc in docs:
        if isinstance(doc.get(field), ObjectId):
            doc[field] = found.get(doc[field])
    return docs


def populate_many(
    doc: dict,
    field: str,
    collection: Collection,
    projection: Optional[Dict[str, int]] = None
) -> dict:
    """
    Replace `doc[field]` (a list of ObjectIds) with the referenced documents,
    keeping the stored order and dropping dangling references.
    """
    ids = [ref for ref in doc.get(field) or [] if isinstance(ref, ObjectId)]
    if not ids:
        doc[field] = []
        return doc

    found = {ref["_id"]: ref for ref in collection.find({"_id": {"$in": ids}}, projection)}
    doc[field] = [found[ref] for ref in ids if ref in found]
    return doc
