"""Test factories for creating test data."""

from tests.factories.revisions import build_blog_registry, make_record, seed_blog_store

__all__ = [
    "build_blog_registry",
    "make_record",
    "seed_blog_store",
]
