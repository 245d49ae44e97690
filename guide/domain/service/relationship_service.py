"""Relationship domain service.

Toggles a user's membership in a target's relationship set (reactions,
saved articles, subscriptions) and mirrors the change on the user's own
inverse set, so both sides of every relationship stay in lock-step:

- reaction:     Article.reactor_ids   <-> User.reacted_article_ids
- save:         Article.saved_by_ids  <-> User.saved_article_ids
- subscription: User.subscriber_ids   <-> User.subscription_ids
"""

from dataclasses import dataclass
from typing import Union
from uuid import UUID

import logfire

from guide.domain.error import InvalidTransitionError, SelfReferenceRejectedError
from guide.domain.model import Article, User
from guide.domain.repository import ArticleRepository, UserRepository
from guide.domain.value import ArticleId, EntityType, RelationKind, UserId

from .base import Service
from .lookup_service import LookupService

Target = Union[Article, User]


@dataclass(frozen=True)
class Relation:
    """Describes which sets a relation kind touches on each side.

    Attributes:
        kind: Relation kind this entry describes
        target_type: Entity type of the toggle target
        forward_field: Set on the target holding actor ids
        inverse_field: Set on the acting user holding target ids
        allow_self: Whether a user may target themselves
    """

    kind: RelationKind
    target_type: EntityType
    forward_field: str
    inverse_field: str
    allow_self: bool = True


RELATIONS: dict[RelationKind, Relation] = {
    RelationKind.REACTION: Relation(
        kind=RelationKind.REACTION,
        target_type=EntityType.ARTICLE,
        forward_field="reactor_ids",
        inverse_field="reacted_article_ids",
    ),
    RelationKind.SAVE: Relation(
        kind=RelationKind.SAVE,
        target_type=EntityType.ARTICLE,
        forward_field="saved_by_ids",
        inverse_field="saved_article_ids",
    ),
    RelationKind.SUBSCRIPTION: Relation(
        kind=RelationKind.SUBSCRIPTION,
        target_type=EntityType.USER,
        forward_field="subscriber_ids",
        inverse_field="subscription_ids",
        allow_self=False,
    ),
}


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of a successful toggle.

    Both entities are the persisted versions, after the change.
    """

    kind: RelationKind
    target: Target
    actor: User
    present: bool


def is_member(kind: RelationKind, target: Target, user_id: UserId) -> bool:
    """Check whether a user is in the target's forward set for a relation kind."""
    relation = RELATIONS[kind]
    return user_id in getattr(target, relation.forward_field)


class RelationshipService(Service):
    """Domain service for toggling bidirectional relationships."""

    def __init__(
        self,
        lookup_service: LookupService,
        user_repository: UserRepository,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize relationship service.

        Args:
            lookup_service: Lookup domain service (resolves or raises NotFoundError)
            user_repository: User repository
            article_repository: Article repository
        """
        self.lookup_service = lookup_service
        self.user_repository = user_repository
        self.article_repository = article_repository

    async def toggle(
        self,
        actor_id: UserId,
        target_id: UUID,
        desired_present: bool,
        kind: RelationKind,
    ) -> ToggleResult:
        """Set the actor's membership in the target's relationship set.

        Steps:
        1. Resolve actor and target
        2. Reject self-reference for kinds that forbid it
        3. Reject a request for the state the relationship is already in
        4. Update the target's forward set and the actor's inverse set
        5. Persist both sides; restore the first if the second write fails

        Args:
            actor_id: Acting user ID
            target_id: Article ID or User ID, depending on kind
            desired_present: Whether the actor should end up in the set
            kind: Relation kind

        Returns:
            Toggle result with the persisted target and actor

        Raises:
            NotFoundError: If actor or target does not exist
            SelfReferenceRejectedError: If actor targets themselves for a
                relation that forbids it
            InvalidTransitionError: If the relationship is already in the
                requested state
            ConcurrentModificationError: If either entity changed since it was read
        """
        relation = RELATIONS[kind]

        with logfire.span(
            "relationship_service.toggle",
            kind=kind.value,
            actor_id=str(actor_id),
            target_id=str(target_id),
            desired_present=desired_present,
        ):
            actor = await self.lookup_service.user(actor_id)
            target = await self._resolve_target(relation, target_id)

            if not relation.allow_self and actor.id == target.id:
                logfire.warn(
                    "Self-reference rejected", kind=kind.value, user_id=str(actor.id)
                )
                raise SelfReferenceRejectedError(kind.value, str(actor.id))

            forward: frozenset = getattr(target, relation.forward_field)
            currently_present = actor.id in forward
            if currently_present == desired_present:
                logfire.warn(
                    "No-op toggle rejected",
                    kind=kind.value,
                    actor_id=str(actor.id),
                    target_id=str(target.id),
                    present=currently_present,
                )
                raise InvalidTransitionError(
                    kind.value, str(target.id), currently_present
                )

            inverse: frozenset = getattr(actor, relation.inverse_field)
            if desired_present:
                new_forward = forward | {actor.id}
                new_inverse = inverse | {target.id}
            else:
                new_forward = forward - {actor.id}
                new_inverse = inverse - {target.id}

            updated_target = target.model_copy(
                update={relation.forward_field: new_forward}
            )
            updated_actor = actor.model_copy(
                update={relation.inverse_field: new_inverse}
            )

            saved_target, saved_actor = await self._persist_pair(
                relation, target, actor, updated_target, updated_actor
            )

            logfire.info(
                "Relationship toggled",
                kind=kind.value,
                actor_id=str(actor.id),
                target_id=str(target.id),
                present=desired_present,
                forward_size=len(new_forward),
            )
            return ToggleResult(
                kind=kind,
                target=saved_target,
                actor=saved_actor,
                present=desired_present,
            )

    async def toggle_reaction(
        self, article_id: ArticleId, user_id: UserId, desired_present: bool
    ) -> ToggleResult:
        """Add or remove a user's reaction to an article."""
        return await self.toggle(
            user_id, article_id, desired_present, RelationKind.REACTION
        )

    async def toggle_saved_article(
        self, article_id: ArticleId, user_id: UserId, desired_present: bool
    ) -> ToggleResult:
        """Save an article for later, or remove it from the saved list."""
        return await self.toggle(user_id, article_id, desired_present, RelationKind.SAVE)

    async def toggle_subscription(
        self, publisher_id: UserId, subscriber_id: UserId, desired_present: bool
    ) -> ToggleResult:
        """Subscribe to or unsubscribe from another user."""
        return await self.toggle(
            subscriber_id, publisher_id, desired_present, RelationKind.SUBSCRIPTION
        )

    async def _resolve_target(self, relation: Relation, target_id: UUID) -> Target:
        if relation.target_type == EntityType.ARTICLE:
            return await self.lookup_service.article(ArticleId(target_id))
        return await self.lookup_service.user(UserId(target_id))

    async def _save_target(self, relation: Relation, target: Target) -> Target:
        if relation.target_type == EntityType.ARTICLE:
            return await self.article_repository.save(target)
        return await self.user_repository.save(target)

    async def _persist_pair(
        self,
        relation: Relation,
        original_target: Target,
        original_actor: User,
        updated_target: Target,
        updated_actor: User,
    ) -> tuple[Target, User]:
        """Write both sides of the relationship.

        The target goes first, except that two users are always written in
        ascending id order: every write holds its row lock until commit, so
        reciprocal subscriptions must lock in the same order.

        If the second write fails, the first entity's pre-operation state is
        written back before the error propagates, so a half-applied toggle is
        never left behind.
        """
        actor_first = (
            relation.target_type == EntityType.USER
            and updated_actor.id < updated_target.id
        )

        async def save_target(entity: Target) -> Target:
            return await self._save_target(relation, entity)

        target_write = (original_target, updated_target, save_target)
        actor_write = (original_actor, updated_actor, self.user_repository.save)
        first, second = (
            (actor_write, target_write) if actor_first else (target_write, actor_write)
        )

        first_original, first_updated, save_first = first
        _, second_updated, save_second = second

        saved_first = await save_first(first_updated)
        try:
            saved_second = await save_second(second_updated)
        except Exception as e:
            logfire.error(
                "Second write failed, restoring first",
                kind=relation.kind.value,
                restored_id=str(first_original.id),
                failed_id=str(second_updated.id),
                error=str(e),
            )
            await save_first(
                first_original.model_copy(update={"version": saved_first.version})
            )
            raise

        if actor_first:
            return saved_second, saved_first
        return saved_first, saved_second
