# lifelessons/serialize.py
from bson import ObjectId
from bson.errors import InvalidId

from lifelessons.core.error_messages import ErrorResponses

PRIVATE_FIELDS = ("password",)


def to_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ErrorResponses.INVALID_ID from None


def serialize_doc(doc):
    """Make a Mongo document JSON-safe: ObjectIds to strings, secrets dropped."""
    if doc is None:
        return None
    if isinstance(doc, list):
        return serialize_list(doc)
    if isinstance(doc, ObjectId):
        return str(doc)
    if not isinstance(doc, dict):
        return doc
    return {
        key: serialize_doc(value)
        for key, value in doc.items()
        if key not in PRIVATE_FIELDS
    }


def serialize_list(docs):
    return [serialize_doc(d) for d in docs]


def insert_result(result) -> dict:
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}


def update_result(result) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
    }


def delete_result(result) -> dict:
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
