"""MongoDB index management utilities.

Index creation with conflict resolution, used by MongoUserRepository.
"""

from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def create_index_safe(collection, keys: list, name: str, **kwargs) -> bool:
    """Create index, repairing an existing index that conflicts with it.

    An existing index conflicts when it shares the name but not the key
    pattern, shares the key pattern under another name, or matches both but
    disagrees on ``unique``. A legacy non-unique ``email`` index is the usual
    case: it must be replaced before duplicates can be rejected.
    """
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise
        return _resolve_conflict(collection, keys, name, **kwargs)


def _conflicts(idx_name: str, idx_info: dict, keys: dict, name: str, unique: bool) -> bool:
    same_name = idx_name == name
    same_keys = dict(idx_info.get('key', [])) == keys
    if same_name != same_keys:
        return True
    return same_name and bool(idx_info.get('unique', False)) != unique


def _resolve_conflict(collection, keys: list, name: str, **kwargs) -> bool:
    """Drop the conflicting index and recreate."""
    wanted = dict(keys)
    unique = bool(kwargs.get('unique', False))

    for idx_name, idx_info in collection.index_information().items():
        if idx_name == '_id_' or not _conflicts(idx_name, idx_info, wanted, name, unique):
            continue

        logger.warning("Dropping conflicting index", extra={"index": idx_name, "collection": collection.name})
        collection.drop_index(idx_name)
        collection.create_index(keys, name=name, **kwargs)
        logger.info("Recreated index", extra={"index": name, "unique": unique})
        return True

    logger.error("Failed to resolve index conflict", extra={"index": name})
    return False
