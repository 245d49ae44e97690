"""Helpers for relationship sets stored in junction tables."""

from collections import defaultdict
from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import Column, Table, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession


async def load_links(
    session: AsyncSession,
    table: Table,
    owner: Column,
    other: Column,
    owner_ids: Sequence[UUID],
) -> dict[UUID, set[UUID]]:
    """Load the linked IDs for several owners in a single query.

    Args:
        session: Database session
        table: Junction table
        owner: Column holding the owning entity's ID
        other: Column holding the linked entity's ID
        owner_ids: Owners to load links for

    Returns:
        Dict mapping owner ID -> set of linked IDs (owners without links are absent)
    """
    if not owner_ids:
        return {}

    stmt = select(owner, other).select_from(table).where(owner.in_(owner_ids))
    result = await session.execute(stmt)

    links: dict[UUID, set[UUID]] = defaultdict(set)
    for owner_id, other_id in result.fetchall():
        links[owner_id].add(other_id)
    return links


async def sync_links(
    session: AsyncSession,
    table: Table,
    owner: Column,
    other: Column,
    owner_id: UUID,
    wanted: Iterable[UUID],
) -> None:
    """Make the junction rows for one owner match the wanted set.

    Only the difference is written: missing rows are inserted and stale rows
    deleted. Rows already written from the other side of the relationship
    are left alone.
    """
    current = (await load_links(session, table, owner, other, [owner_id])).get(
        owner_id, set()
    )
    wanted = set(wanted)

    removed = current - wanted
    if removed:
        await session.execute(
            delete(table).where(owner == owner_id).where(other.in_(removed))
        )

    added = wanted - current
    if added:
        await session.execute(
            insert(table),
            [{owner.name: owner_id, other.name: other_id} for other_id in added],
        )
