"""Generic list/get/create/update/delete over one table.

Each table is described once by a :class:`Resource`; the HTTP layer builds its
routes from the same description.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Tuple, Type

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database import get_session
from ..errors import ApiError, classify_integrity_error, foreign_key_error, not_found
from ..models import OperationType
from ..schemas import parse_payload
from ..schemas.base import CamelModel, ResponseModel
from . import audit
from .params import parse_id, parse_page, present

logger = logging.getLogger(__name__)


class ListFilter(NamedTuple):
    """Equality filter bound to a query parameter."""

    param: str
    column: Any
    parse: Callable[[str], Any]


class Conflict(NamedTuple):
    """Error reported when a write violates the table's uniqueness rule."""

    status_code: int
    message: str
    code: str

    def error(self) -> ApiError:
        return ApiError(self.status_code, self.message, self.code)


# hook(session, values, existing_row_or_None)
WriteHook = Callable[[Session, Dict[str, Any], Optional[Any]], None]


@dataclass(frozen=True)
class Resource:
    """Description of one table exposed through the uniform CRUD contract."""

    path: str
    label: str
    model: Type[Any]
    response_schema: Type[ResponseModel]
    create_schema: Optional[Type[CamelModel]] = None
    update_schema: Optional[Type[CamelModel]] = None
    search_columns: Tuple[Any, ...] = ()
    filters: Tuple[ListFilter, ...] = ()
    default_limit: int = 10
    max_limit: int = 100
    order_by: Tuple[Any, ...] = ()
    conflict: Optional[Conflict] = None
    before_write: Optional[WriteHook] = None
    audit: bool = True

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def render(self, row: Any) -> Dict[str, Any]:
        return self.response_schema.model_validate(row).to_json()


def flush_or_raise(
    session: Session,
    label: str,
    action: str,
    conflict: Optional[Conflict] = None,
) -> None:
    """Flush pending changes, converting constraint violations into ``ApiError``."""
    try:
        session.flush()
    except IntegrityError as exc:
        kind = classify_integrity_error(exc)
        if kind == "unique" and conflict is not None:
            raise conflict.error() from exc
        if kind == "foreign_key":
            raise foreign_key_error(action, label) from exc
        raise


def _load(session: Session, resource: Resource, row_id: int) -> Any:
    row = session.get(resource.model, row_id)
    if row is None:
        raise not_found(resource.label)
    return row


def list_rows(resource: Resource, params: Mapping[str, str]) -> List[Dict[str, Any]]:
    """Return one page of rows matching the search term and filters."""
    page = parse_page(params, resource.default_limit, resource.max_limit)

    conditions = []
    search = params.get("search")
    if present(search) and resource.search_columns:
        term = f"%{search.strip()}%"
        conditions.append(or_(*(column.ilike(term) for column in resource.search_columns)))

    for list_filter in resource.filters:
        raw = params.get(list_filter.param)
        if present(raw):
            conditions.append(list_filter.column == list_filter.parse(raw))

    query = select(resource.model)
    if conditions:
        query = query.where(*conditions)
    query = query.order_by(*(resource.order_by or (resource.model.id,)))
    query = query.limit(page.limit).offset(page.offset)

    with get_session() as session:
        rows = session.scalars(query).all()
        return [resource.render(row) for row in rows]


def get_row(resource: Resource, raw_id: Optional[str]) -> Dict[str, Any]:
    row_id = parse_id(raw_id)
    with get_session() as session:
        return resource.render(_load(session, resource, row_id))


def create_row(resource: Resource, payload: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    data = parse_payload(resource.create_schema, payload)
    values = data.model_dump()
    statement = audit.render_insert(resource.table_name, values)

    with audit.audited(OperationType.INSERT, resource.table_name, statement, enabled=resource.audit) as trail:
        session = trail.session
        if resource.before_write:
            resource.before_write(session, values, None)
        row = resource.model(**{k: v for k, v in values.items() if v is not None})
        session.add(row)
        flush_or_raise(session, resource.label, "create", resource.conflict)
        logger.debug(f"Created {resource.table_name} row {row.id}")
        return resource.render(row)


def update_row(
    resource: Resource,
    raw_id: Optional[str],
    payload: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Apply a partial update; a payload without fields returns the row unchanged."""
    row_id = parse_id(raw_id)
    data = parse_payload(resource.update_schema, payload)
    changes = data.changes()
    if not changes:
        return get_row(resource, str(row_id))

    statement = audit.render_update(resource.table_name, changes, row_id)
    with audit.audited(OperationType.UPDATE, resource.table_name, statement, enabled=resource.audit) as trail:
        session = trail.session
        row = _load(session, resource, row_id)
        if resource.before_write:
            resource.before_write(session, changes, row)
        for key, value in changes.items():
            setattr(row, key, value)
        flush_or_raise(session, resource.label, "update", resource.conflict)
        return resource.render(row)


def delete_row(resource: Resource, raw_id: Optional[str]) -> Dict[str, Any]:
    """Delete a row and return its last image; referenced rows are kept."""
    row_id = parse_id(raw_id)
    statement = audit.render_delete(resource.table_name, row_id)
    with audit.audited(OperationType.DELETE, resource.table_name, statement, enabled=resource.audit) as trail:
        session = trail.session
        row = _load(session, resource, row_id)
        image = resource.render(row)
        session.delete(row)
        flush_or_raise(session, resource.label, "delete")
        return {"message": f"{resource.label} deleted successfully", "deleted": image}
