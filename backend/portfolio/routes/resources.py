"""
Portfolio Backend — Resource Router Factory
=============================================

What:  Builds the five CRUD routes for one portfolio resource.
Why:   Skills, blogs and projects expose the same routes with different
       bodies; the factory keeps one definition of status codes and docs.

Routes built for plural "skills":
    POST   /api/v1/skills          → 201 {success, message}
    GET    /api/v1/skills          → 200 {success, data: [...]}
    GET    /api/v1/skills/{id}     → 200 {success, data: {...}} | 404
    PUT    /api/v1/skills/{id}     → 200 {success, message}     | 404
    DELETE /api/v1/skills/{id}     → 200 {acknowledged, deletedCount}

No route checks a bearer token.
"""

from typing import List, Optional, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from pymongo.asynchronous.database import AsyncDatabase

from portfolio.database import get_database
from portfolio.routes import API_PREFIX
from portfolio.schemas.common import DataResponse, DeleteResponse, ErrorResponse, MessageResponse
from portfolio.schemas.resources import RecordBase
from portfolio.services.resource_service import ResourceService

_SERVER_ERROR = {"description": "Server error", "model": ErrorResponse}


def create_resource_router(
    service: ResourceService,
    input_model: Type[BaseModel],
    record_model: Type[RecordBase],
    plural: str,
    legacy_create_path: Optional[str] = None,
) -> APIRouter:
    """
    Args:
        service: ResourceService bound to the resource's collection.
        input_model: Body model for create and update.
        record_model: Model used to render stored documents.
        plural: Path segment, e.g. "skills".
        legacy_create_path: Extra POST path accepted for create, kept out of
            the OpenAPI schema (e.g. "/create-skill").
    """
    router = APIRouter(prefix=API_PREFIX, tags=[plural.capitalize()])
    label = service.label
    not_found = {"description": f"{label} not found", "model": ErrorResponse}

    async def create_resource(
        payload: input_model,
        db: AsyncDatabase = Depends(get_database),
    ) -> MessageResponse:
        return await service.create(db, payload)

    router.add_api_route(
        f"/{plural}",
        create_resource,
        methods=["POST"],
        status_code=status.HTTP_201_CREATED,
        response_model=MessageResponse,
        responses={500: _SERVER_ERROR},
        summary=f"Create a {service.resource}",
    )
    if legacy_create_path:
        router.add_api_route(
            legacy_create_path,
            create_resource,
            methods=["POST"],
            status_code=status.HTTP_201_CREATED,
            response_model=MessageResponse,
            include_in_schema=False,
        )

    @router.get(
        f"/{plural}",
        response_model=DataResponse[List[record_model]],
        responses={500: _SERVER_ERROR},
        summary=f"List all {plural}",
    )
    async def list_resources(db: AsyncDatabase = Depends(get_database)):
        return await service.list(db)

    @router.get(
        f"/{plural}/{{record_id}}",
        response_model=DataResponse[record_model],
        responses={404: not_found, 500: _SERVER_ERROR},
        summary=f"Get a {service.resource} by id",
    )
    async def get_resource(record_id: str, db: AsyncDatabase = Depends(get_database)):
        return await service.get(db, record_id)

    @router.put(
        f"/{plural}/{{record_id}}",
        response_model=MessageResponse,
        responses={404: not_found, 500: _SERVER_ERROR},
        summary=f"Replace a {service.resource}",
    )
    async def update_resource(
        record_id: str,
        payload: input_model,
        db: AsyncDatabase = Depends(get_database),
    ) -> MessageResponse:
        return await service.update(db, record_id, payload)

    @router.delete(
        f"/{plural}/{{record_id}}",
        response_model=DeleteResponse,
        responses={500: _SERVER_ERROR},
        summary=f"Delete a {service.resource}",
    )
    async def delete_resource(record_id: str, db: AsyncDatabase = Depends(get_database)):
        return await service.delete(db, record_id)

    return router
