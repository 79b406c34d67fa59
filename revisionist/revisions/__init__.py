"""Revision display resolution.

Contains the record models and the resolvers that turn a stored revision
into display strings:
- FieldNameResolver for field labels
- ReferenceResolver for foreign key values
- ValueResolver for old/new values
- RevisionPresenter bundling all of them
"""

from revisionist.revisions.actors import ActorLookup, EntityStoreActorLookup, NullActorLookup
from revisionist.revisions.labels import FieldNameResolver
from revisionist.revisions.models import RevisionRecord, RevisionView, ValueSide
from revisionist.revisions.pipeline import ValueResolver
from revisionist.revisions.presenter import RevisionPresenter
from revisionist.revisions.references import (
    ReferenceResolver,
    RelationNotFound,
    ResolvedReference,
)

__all__ = [
    "ActorLookup",
    "EntityStoreActorLookup",
    "FieldNameResolver",
    "NullActorLookup",
    "ReferenceResolver",
    "RelationNotFound",
    "ResolvedReference",
    "RevisionPresenter",
    "RevisionRecord",
    "RevisionView",
    "ValueResolver",
    "ValueSide",
]
