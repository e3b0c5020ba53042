"""FieldResolver: maps Jira field schemas onto the locally supported kinds."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeGuard

import click

from jiracli.errors import RemoteError, show_error
from jiracli.types import FieldDescriptor, LocalKind

if TYPE_CHECKING:
    from jiracli.session import Session

logger = logging.getLogger(__name__)

# Closed whitelist: schema type -> local kind.
SUPPORTED_TYPES: dict[str, LocalKind] = {
    "number": "numeric",
    "string": "textual",
}


@dataclass(frozen=True)
class ResolvedField:
    local_kind: LocalKind
    remote_key: str


def schema_type(field: FieldDescriptor) -> str | None:
    schema = field.get("schema") or {}
    return schema.get("type")


def is_supported(field_type: object) -> TypeGuard[str]:
    return isinstance(field_type, str) and field_type in SUPPORTED_TYPES


async def list_fields(session: Session) -> list[FieldDescriptor]:
    """Fetch every field the server knows about. Failures propagate."""
    result: list[FieldDescriptor] = await session.remote.spin(
        "Retrieving the fields...", session.remote.request("/field")
    )
    return result


def find_field(fields: list[FieldDescriptor], name: str) -> FieldDescriptor | None:
    """First field whose display name equals ``name`` exactly."""
    for field in fields:
        if field.get("name") == name:
            return field
    return None


def _remote_key(field: FieldDescriptor) -> str:
    return field.get("key") or field.get("id", "")


async def resolve(session: Session, field_name: str) -> ResolvedField | None:
    """Resolve a display name to its API key and local kind.

    Returns None after printing a diagnostic when the listing fails, when no
    field has that name, or when its schema type is not supported.
    """
    try:
        fields = await list_fields(session)
    except RemoteError as e:
        show_error(session, e)
        return None

    field = find_field(fields, field_name)
    if field is None:
        click.echo(f'Unable to find the field "{field_name}"')
        return None

    field_type = schema_type(field)
    if not is_supported(field_type):
        click.echo("Unsupported field")
        return None

    resolved = ResolvedField(local_kind=SUPPORTED_TYPES[field_type], remote_key=_remote_key(field))
    logger.info(
        "field resolved",
        extra={"field": field_name, "kind": resolved.local_kind, "args_data": {"key": resolved.remote_key}},
    )
    return resolved


async def configured_fields(session: Session) -> list[tuple[str, ResolvedField]]:
    """Resolve every configured field name against a single listing.

    Names missing remotely or no longer supported are skipped silently.
    """
    if not session.config.fields:
        return []
    fields = await list_fields(session)
    resolved: list[tuple[str, ResolvedField]] = []
    for name in session.config.fields:
        field = find_field(fields, name)
        if field is None:
            continue
        field_type = schema_type(field)
        if is_supported(field_type):
            resolved.append((name, ResolvedField(SUPPORTED_TYPES[field_type], _remote_key(field))))
    return resolved
