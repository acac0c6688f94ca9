"""
Generic CRUD endpoint builder.

Every pharmacy table is exposed through the same contract on one path:

    GET     /<resource>          list all rows
    GET     /<resource>?id=N     fetch one row
    POST    /<resource>          create from a JSON body
    PUT     /<resource>?id=N     partial update from a JSON body
    DELETE  /<resource>?id=N     delete one row

A ResourceDescriptor carries everything that differs between tables: the ORM
model, the schemas acting as field whitelists, the label used in messages and
the optional hooks for value preparation and unique-key conflicts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pharmacy_api.core.deps import get_session
from pharmacy_api.db.base import Base
from pharmacy_api.repositories.crud import CrudRepository
from pharmacy_api.schemas.common import MAX_INT, message_body

logger = logging.getLogger(__name__)

ValuesHook = Callable[[Dict[str, Any]], Dict[str, Any]]


@dataclass(frozen=True)
class ResourceDescriptor:
    """Declarative description of one table-backed resource."""

    path: str
    tag: str
    label: str
    model: Type[Base]
    read_schema: Type[BaseModel]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    id_type: type = int
    id_label: Optional[str] = None
    prepare: Optional[ValuesHook] = None
    conflict_message: Optional[str] = None

    @property
    def id_name(self) -> str:
        return self.id_label or self.label


def _bad_request(message: str, details: Any = None) -> HTTPException:
    detail: Any = message if details is None else {"message": message, "details": details}
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _field_errors(exc: ValidationError) -> List[Dict[str, str]]:
    return [
        {"field": ".".join(str(p) for p in err["loc"]) or "body", "error": err["msg"]}
        for err in exc.errors()
    ]


def _validate(schema: Type[BaseModel], body: Any, prefix: str) -> BaseModel:
    """Validate a decoded JSON body against a whitelist schema, mapping failures to 400."""
    if not isinstance(body, dict):
        raise _bad_request("Request body must be a JSON object.")
    try:
        return schema.model_validate(body)
    except ValidationError as exc:
        errors = _field_errors(exc)
        fields = sorted({e["field"].split(".")[0] for e in errors})
        raise _bad_request(f"{prefix}: {', '.join(fields)}.", details=errors)


def _parse_id(descriptor: ResourceDescriptor, raw: str) -> Any:
    value = raw.strip()
    if descriptor.id_type is int:
        # ASCII digits only; int() also accepts underscores and signs
        if not (value.isascii() and value.isdigit()):
            raise _bad_request(f"Invalid {descriptor.id_name} ID.")
        parsed = int(value)
        if not 0 < parsed <= MAX_INT:
            raise _bad_request(f"Invalid {descriptor.id_name} ID.")
        return parsed
    return value


def _require_id(descriptor: ResourceDescriptor, raw: Optional[str], action: str) -> Any:
    if raw is None or not raw.strip():
        raise _bad_request(f"{descriptor.id_name} ID is required for {action}.")
    return _parse_id(descriptor, raw)


def _not_found(descriptor: ResourceDescriptor) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{descriptor.label} not found.")


# PUBLIC_INTERFACE
def build_crud_router(descriptor: ResourceDescriptor) -> APIRouter:
    """
    Build the five-operation router for a resource.

    Parameters:
        descriptor: table metadata and schemas for the resource
    Returns:
        APIRouter mounted at descriptor.path
    """
    router = APIRouter(prefix=descriptor.path, tags=[descriptor.tag])
    label = descriptor.label
    def id_query():
        return Query(None, alias="id", description=f"{label} identifier")

    def _dump(row: Any) -> Dict[str, Any]:
        return descriptor.read_schema.model_validate(row).model_dump(mode="json")

    # PUBLIC_INTERFACE
    @router.get(
        "",
        summary=f"List or get {label.lower()} records",
        description="Without `id` return every row (possibly an empty array); with `id` return one row.",
    )
    async def read_rows(
        row_id: Optional[str] = id_query(),
        session: AsyncSession = Depends(get_session),
    ):
        repo = CrudRepository(session, descriptor.model)
        if row_id is None or not row_id.strip():
            return [_dump(r) for r in await repo.list_all()]
        row = await repo.get(_parse_id(descriptor, row_id))
        if row is None:
            raise _not_found(descriptor)
        return _dump(row)

    # PUBLIC_INTERFACE
    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {label.lower()}",
        description="Insert a row from the whitelisted body fields; returns the new id.",
    )
    async def create_row(
        body: Any = Body(None),
        session: AsyncSession = Depends(get_session),
    ):
        payload = _validate(descriptor.create_schema, body, "Missing or invalid required fields")
        values = payload.model_dump()
        if descriptor.prepare is not None:
            values = descriptor.prepare(values)

        repo = CrudRepository(session, descriptor.model)
        try:
            new_id = await repo.create(values)
        except IntegrityError:
            if descriptor.conflict_message is None:
                raise
            await repo.rollback()
            logger.info("%s create rejected: duplicate key", label)
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=descriptor.conflict_message)

        logger.info("%s %s created", label, new_id)
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=message_body(f"{label} created successfully.", id=new_id),
        )

    # PUBLIC_INTERFACE
    @router.put(
        "",
        summary=f"Update {label.lower()}",
        description="Partial update: only fields present (and not null) in the body are written.",
    )
    async def update_row(
        row_id: Optional[str] = id_query(),
        body: Any = Body(None),
        session: AsyncSession = Depends(get_session),
    ):
        target = _require_id(descriptor, row_id, "update")
        payload = _validate(descriptor.update_schema, body, "Invalid values for fields")
        values = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
        if not values:
            raise _bad_request("No fields provided for update.")
        if descriptor.prepare is not None:
            values = descriptor.prepare(values)

        repo = CrudRepository(session, descriptor.model)
        if not await repo.update(target, values):
            raise _not_found(descriptor)
        logger.info("%s %s updated (%s)", label, target, ", ".join(sorted(values)))
        return message_body(f"{label} updated successfully.")

    # PUBLIC_INTERFACE
    @router.delete(
        "",
        summary=f"Delete {label.lower()}",
    )
    async def delete_row(
        row_id: Optional[str] = id_query(),
        session: AsyncSession = Depends(get_session),
    ):
        target = _require_id(descriptor, row_id, "deletion")
        repo = CrudRepository(session, descriptor.model)
        if not await repo.delete(target):
            raise _not_found(descriptor)
        logger.info("%s %s deleted", label, target)
        return message_body(f"{label} deleted successfully.")

    return router
