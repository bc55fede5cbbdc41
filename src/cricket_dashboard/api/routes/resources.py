"""List/get/create/update/delete routes generated from resource definitions."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Request

from ...services import crud
from ...services.crud import Resource
from ...services.resources import RESOURCES, SQL_LOGS


def resource_router(resource: Resource) -> APIRouter:
    """Build the routes of one table; ``?id=N`` selects a single row."""
    router = APIRouter(tags=[resource.path])
    path = f"/api/{resource.path}"
    name = resource.path.replace("-", "_")

    @router.get(path, name=f"read_{name}")
    def read(request: Request):
        params = request.query_params
        if "id" in params:
            return crud.get_row(resource, params.get("id"))
        return crud.list_rows(resource, params)

    if resource.create_schema is not None:
        @router.post(path, status_code=201, name=f"create_{name}")
        def create(payload: Optional[Any] = Body(None)):
            return crud.create_row(resource, payload)

    if resource.update_schema is not None:
        @router.put(path, name=f"update_{name}")
        def update(request: Request, payload: Optional[Any] = Body(None)):
            return crud.update_row(resource, request.query_params.get("id"), payload)

    @router.delete(path, name=f"delete_{name}")
    def delete(request: Request):
        return crud.delete_row(resource, request.query_params.get("id"))

    return router


router = APIRouter()
for _resource in RESOURCES + (SQL_LOGS,):
    router.include_router(resource_router(_resource))
