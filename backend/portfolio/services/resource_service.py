"""
Portfolio Backend — Resource Service (Skills, Blogs, Projects)
================================================================

What:  Create / list / get / replace / delete for one document collection.
Why:   The three portfolio resources share one lifecycle, so one class
       parametrized by collection, label and record model serves all three.
How:   Each method makes exactly one store call and maps the result into a
       response schema. Store failures become DatabaseError; a missing id
       becomes NotFoundError.

Operations:
    create  → insert_one                         → "<Label> added successfully"
    list    → find({}) in storage order          → every document, unpaginated
    get     → find_one({_id})                    → NotFoundError when absent
    update  → replace_one({_id}, fields)         → NotFoundError when matched == 0
    delete  → delete_one({_id})                  → store result, even when 0 deleted

Update semantics:
    A replace whose content equals the stored document matches one document
    and modifies none. Success is therefore judged on the matched count, so
    such an update reports success rather than "not found".
"""

import logging
from typing import List, Type

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo.asynchronous.database import AsyncDatabase

from portfolio.database import BLOGS_COLLECTION, PROJECTS_COLLECTION, SKILLS_COLLECTION
from portfolio.exceptions import DatabaseError, NotFoundError
from portfolio.schemas.common import DataResponse, DeleteResponse, MessageResponse
from portfolio.schemas.resources import BlogRecord, ProjectRecord, RecordBase, SkillRecord

logger = logging.getLogger(__name__)


class ResourceService:
    """
    CRUD over a single collection.

    Args:
        collection_name: Mongo collection holding the documents.
        resource: Lower-case singular label used in messages ("skill").
        record_model: Schema used to render stored documents.
    """

    def __init__(self, collection_name: str, resource: str, record_model: Type[RecordBase]):
        self.collection_name = collection_name
        self.resource = resource
        self.label = resource.capitalize()
        self.record_model = record_model

    def _collection(self, db: AsyncDatabase):
        return db[self.collection_name]

    def _object_id(self, record_id: str) -> ObjectId:
        """
        Parses a path identifier into an ObjectId.

        Malformed ids are a store-level failure (500), not a 404.
        """
        try:
            return ObjectId(record_id)
        except (InvalidId, TypeError) as e:
            logger.error("Malformed %s id %r: %s", self.resource, record_id, str(e))
            raise DatabaseError(
                message=f"Error processing {self.resource}",
                context={"resource_id": record_id, "error_type": type(e).__name__},
            )

    def _store_error(self, action: str, e: Exception, **context) -> DatabaseError:
        logger.error("Error %s %s: %s", action, self.resource, str(e), exc_info=True)
        context["error_type"] = type(e).__name__
        return DatabaseError(message=f"Error {action} {self.resource}", context=context)

    async def create(self, db: AsyncDatabase, payload: BaseModel) -> MessageResponse:
        try:
            result = await self._collection(db).insert_one(payload.model_dump())
        except Exception as e:
            raise self._store_error("adding", e)

        logger.info("%s created: %s", self.label, result.inserted_id)
        return MessageResponse(message=f"{self.label} added successfully")

    async def list(self, db: AsyncDatabase) -> DataResponse:
        try:
            documents = await self._collection(db).find({}).to_list()
        except Exception as e:
            raise self._store_error("fetching", e)

        return DataResponse[List[self.record_model]](
            data=[self.record_model.from_document(doc) for doc in documents]
        )

    async def get(self, db: AsyncDatabase, record_id: str) -> DataResponse:
        oid = self._object_id(record_id)
        try:
            document = await self._collection(db).find_one({"_id": oid})
        except Exception as e:
            raise self._store_error("fetching", e, resource_id=record_id)

        if document is None:
            raise NotFoundError(resource=self.resource, resource_id=record_id)

        return DataResponse[self.record_model](data=self.record_model.from_document(document))

    async def update(
        self, db: AsyncDatabase, record_id: str, payload: BaseModel
    ) -> MessageResponse:
        """
        Replaces every editable field of the document (no merge).

        Raises:
            NotFoundError: no document has this id.
            DatabaseError: malformed id or store failure.
        """
        oid = self._object_id(record_id)
        try:
            result = await self._collection(db).replace_one({"_id": oid}, payload.model_dump())
        except Exception as e:
            raise self._store_error("updating", e, resource_id=record_id)

        if result.matched_count == 0:
            raise NotFoundError(resource=self.label, resource_id=record_id)

        logger.info(
            "%s %s replaced (modified=%d)", self.label, record_id, result.modified_count
        )
        return MessageResponse(message=f"{self.label} updated successfully")

    async def delete(self, db: AsyncDatabase, record_id: str) -> DeleteResponse:
        """Deletes by id without checking existence first."""
        oid = self._object_id(record_id)
        try:
            result = await self._collection(db).delete_one({"_id": oid})
        except Exception as e:
            raise self._store_error("deleting", e, resource_id=record_id)

        logger.info("%s %s delete: %d removed", self.label, record_id, result.deleted_count)
        return DeleteResponse(acknowledged=result.acknowledged, deleted_count=result.deleted_count)


skill_service = ResourceService(SKILLS_COLLECTION, "skill", SkillRecord)
blog_service = ResourceService(BLOGS_COLLECTION, "blog", BlogRecord)
project_service = ResourceService(PROJECTS_COLLECTION, "project", ProjectRecord)
