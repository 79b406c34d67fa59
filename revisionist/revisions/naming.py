"""Foreign key naming conventions."""

import inflection

FOREIGN_KEY_SUFFIX = "_id"


def is_foreign_key(field: str) -> bool:
    """Whether a field identifier follows the '<relation>_id' convention."""
    return field.endswith(FOREIGN_KEY_SUFFIX) and len(field) > len(FOREIGN_KEY_SUFFIX)


def strip_foreign_key_suffix(field: str) -> str:
    """'author_id' -> 'author'; other identifiers are returned unchanged."""
    if not is_foreign_key(field):
        return field
    return field[: -len(FOREIGN_KEY_SUFFIX)]


def relation_name_candidates(field: str) -> list[str]:
    """Relation names to try for a foreign key field, in order.

    'published_status_id' yields 'published_status' then 'publishedStatus'.
    """
    stem = strip_foreign_key_suffix(field)
    candidates = [stem]
    camel = inflection.camelize(stem, uppercase_first_letter=False)
    if camel != stem:
        candidates.append(camel)
    return candidates
