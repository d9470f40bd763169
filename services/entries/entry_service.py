"""
Entry Service - JSON entries on top of the key/value store
Captures query-string payloads, serializes them on write and parses them on read
"""

import json
from typing import Any, Dict, Iterable, List, Tuple, Union

from services.entries.exceptions import KeyNotFound, MalformedValue
from utils.logger import logger

PayloadValue = Union[str, List[str]]


def capture_payload(query_items: Iterable[Tuple[str, str]]) -> Dict[str, PayloadValue]:
    """
    Turn query-string pairs into the value object stored for an entry

    A parameter given once maps to its string value; a repeated parameter
    maps to the list of its values in order of appearance.
    """
    payload: Dict[str, PayloadValue] = {}

    for name, value in query_items:
        if name not in payload:
            payload[name] = value
        elif isinstance(payload[name], list):
            payload[name].append(value)
        else:
            payload[name] = [payload[name], value]

    return payload


class EntryService:
    """
    Reads and writes entries through an injected store

    The store only needs async get/set/keys; the service owns serialization
    and the absent/malformed value rules.
    """

    def __init__(self, store):
        self.store = store

    async def store_entry(self, key: str, payload: Dict[str, Any]) -> None:
        """Serialize payload and write it under key, overwriting any prior value"""
        await self.store.set(key, json.dumps(payload))
        logger.info(f"Stored entry '{key}' ({len(payload)} fields)")

    async def fetch_entry(self, key: str) -> Any:
        """
        Read the entry under key and return the parsed JSON document

        Raises:
            KeyNotFound: nothing is stored under key
            MalformedValue: the stored string is not JSON
        """
        raw = await self.store.get(key)

        if raw is None:
            logger.info(f"Entry '{key}' not found")
            raise KeyNotFound(key)

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Entry '{key}' holds a non-JSON value")
            raise MalformedValue(key, e.msg) from e

    async def list_keys(self, pattern: str = "*") -> List[str]:
        return sorted(await self.store.keys(pattern))
