"""Read-side validation of persisted custom chain records.

Persisted data is treated as untrusted on every read: another process may have
written it, or it may have been edited by hand. Records are normalised and
filtered here rather than rejected, so a bad record never breaks a listing.
"""

import json
import logging
from typing import Any, Iterable

from pydantic import ValidationError

from orbitregistry.domain.models import CustomChainEntry

logger = logging.getLogger(__name__)

CHAIN_ID_KEY = "chainId"
PARENT_CHAIN_ID_KEY = "parentChainId"
CHILD_CHAIN_IDS_KEY = "childChainIds"


def coerce_chain_id(value: Any) -> int | None:
    """Canonical integer form of a persisted chain ID, or None if it has none.

    Accepts ints, integral floats and numeric strings, including hex such as
    ``"0x66eee"`` (stored IDs may have been round-tripped through text).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        for base in (10, 0):
            try:
                return int(text, base)
            except ValueError:
                pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def decode_persisted_chains(raw: str | None) -> list[Any]:
    """JSON array stored under the custom chains key; [] when absent or unreadable."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning("Discarding undecodable custom chain data")
        return []
    if not isinstance(data, list):
        logger.warning("Discarding custom chain data: expected a JSON array, got %s", type(data).__name__)
        return []
    return data


def normalise_chain_links(record: dict[str, Any]) -> dict[str, Any]:
    """Coerce the parent and child links the hierarchy walk depends on.

    An unusable parent ID becomes None. Children that are missing, not a list,
    or not chain IDs are dropped, so ``childChainIds`` is always a list of ints.
    """
    values = dict(record)
    if values.get(PARENT_CHAIN_ID_KEY) is not None:
        values[PARENT_CHAIN_ID_KEY] = coerce_chain_id(values[PARENT_CHAIN_ID_KEY])
    children = values.get(CHILD_CHAIN_IDS_KEY)
    if not isinstance(children, list):
        children = []
    values[CHILD_CHAIN_IDS_KEY] = [child for child in map(coerce_chain_id, children) if child is not None]
    return values


def to_custom_chain(record: dict[str, Any], chain_id: int) -> CustomChainEntry:
    """Build an entry with the coerced chain ID and links. Other fields are not enforced."""
    values = {**normalise_chain_links(record), CHAIN_ID_KEY: chain_id}
    try:
        return CustomChainEntry.model_validate(values)
    except ValidationError as exc:
        logger.warning("Custom chain %s kept without validation: %s", chain_id, exc.errors()[0]["msg"])
        return CustomChainEntry.model_construct(**values)


def validate_persisted_chains(records: Iterable[Any], reserved_chain_ids: Iterable[int]) -> list[CustomChainEntry]:
    """Normalise persisted records into entries, dropping those that cannot be used.

    Dropped: non-object records, records without a usable chain ID, and records
    claiming a reserved chain ID.
    """
    reserved = set(reserved_chain_ids)
    chains: list[CustomChainEntry] = []
    for record in records:
        if not isinstance(record, dict):
            logger.warning("Dropping custom chain record of type %s", type(record).__name__)
            continue
        chain_id = coerce_chain_id(record.get(CHAIN_ID_KEY))
        if chain_id is None:
            logger.warning("Dropping custom chain record with chain ID %r", record.get(CHAIN_ID_KEY))
            continue
        # filter again in case the store was tampered with
        if chain_id in reserved:
            continue
        chains.append(to_custom_chain(record, chain_id))
    return chains


def encode_chains(chains: list[CustomChainEntry]) -> str:
    return json.dumps([chain.model_dump(mode="json", by_alias=True, exclude_none=True) for chain in chains])
