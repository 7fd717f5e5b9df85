"""
Observation stores for the entry collection.

A store maps one collection ID to the full, serialized list of entries.
Every store reads and writes the whole collection at once; entries are kept
as a JSON array of camelCase records:

    [{"id": 1704067200000, "periodDate": "2024-01-01",
      "ovulationDate": "2024-01-15", "cycleLength": null}, ...]

Reads through load() fail closed: a missing, unparseable or invalid payload
loads as an empty collection instead of raising. Mutations read through
read(), which also treats a corrupt payload as empty but raises StorageError
when the backend cannot be reached, so a failed read is never written back
over the stored collection.

Typical usage:
    store = DynamoEntryStore(get_dynamo())
    entries = store.load()
    store.save(entries)
"""
import json
from typing import Dict, List, Optional, Protocol
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import TypeAdapter, ValidationError

from src.models.entry import Entry
from src.services.constants import DEFAULT_COLLECTION_ID
from src.services.exceptions import StorageError
from src.utils.dynamo import DynamoDBClient, create_pk, create_entries_sk
from src.utils.logging import logger, log_exception

_entries_adapter = TypeAdapter(List[Entry])

class ObservationStore(Protocol):
    """Durable home of one entry collection."""

    def read(self) -> List[Entry]:
        ...

    def load(self) -> List[Entry]:
        ...

    def save(self, entries: List[Entry]) -> None:
        ...

    def clear(self) -> None:
        ...

def serialize_entries(entries: List[Entry]) -> str:
    """Serialize entries to the persisted JSON payload."""
    return json.dumps([entry.to_record() for entry in entries])

def deserialize_entries(payload: Optional[str], collection_id: str = DEFAULT_COLLECTION_ID) -> List[Entry]:
    """
    Parse a persisted JSON payload into entries.

    Args:
        payload: Stored JSON string, or None if nothing is stored
        collection_id: Collection the payload belongs to, for logging

    Returns:
        Parsed entries, or an empty list if the payload is absent or corrupt
    """
    if not payload:
        return []
    try:
        records = json.loads(payload)
        return _entries_adapter.validate_python(records)
    except (ValueError, TypeError, ValidationError) as e:
        log_exception(logger, "Discarding unreadable entry collection", exc_info=e, level="warning", extra={
            "collection_id": collection_id,
            "error_type": e.__class__.__name__
        })
        return []

class InMemoryStore:
    """
    Store that keeps serialized payloads in a dictionary.

    Several stores may share one backing dictionary to model independent
    collections in the same storage.
    """

    def __init__(self, collection_id: str = DEFAULT_COLLECTION_ID, backing: Optional[Dict[str, str]] = None):
        self.collection_id = collection_id
        self.backing = backing if backing is not None else {}

    def read(self) -> List[Entry]:
        return deserialize_entries(self.backing.get(self.collection_id), self.collection_id)

    def load(self) -> List[Entry]:
        return self.read()

    def save(self, entries: List[Entry]) -> None:
        self.backing[self.collection_id] = serialize_entries(entries)

    def clear(self) -> None:
        self.backing.pop(self.collection_id, None)

class DynamoEntryStore:
    """Store that keeps an entry collection in a single DynamoDB item."""

    def __init__(self, dynamo: DynamoDBClient, collection_id: str = DEFAULT_COLLECTION_ID):
        self.dynamo = dynamo
        self.collection_id = collection_id

    def _key(self) -> Dict[str, str]:
        return {
            "PK": create_pk(self.collection_id),
            "SK": create_entries_sk()
        }

    def read(self) -> List[Entry]:
        """
        Read the entry collection for a read-modify-write.

        Returns:
            Stored entries, or an empty list if the item is missing or its
            payload is unreadable

        Raises:
            StorageError: If the item could not be fetched
        """
        try:
            item = self.dynamo.get_item(self._key())
        except (BotoCoreError, ClientError) as e:
            logger.exception("Failed to read entry collection", exc_info=e, extra={
                "collection_id": self.collection_id
            })
            raise StorageError(f"Failed to read entry collection: {str(e)}") from e

        if not item:
            return []
        return deserialize_entries(item.get("data"), self.collection_id)

    def load(self) -> List[Entry]:
        """
        Load the entry collection for display.

        Returns:
            Stored entries, or an empty list if the item is missing,
            unreadable or cannot be fetched
        """
        try:
            return self.read()
        except StorageError:
            return []

    def save(self, entries: List[Entry]) -> None:
        """
        Overwrite the stored entry collection.

        Raises:
            StorageError: If the item could not be written
        """
        try:
            self.dynamo.put_item({
                **self._key(),
                "collection_id": self.collection_id,
                "data": serialize_entries(entries)
            })
            logger.info("Saved entry collection", extra={
                "collection_id": self.collection_id,
                "count": len(entries)
            })
        except (BotoCoreError, ClientError) as e:
            logger.exception("Failed to save entry collection", exc_info=e, extra={
                "collection_id": self.collection_id
            })
            raise StorageError(f"Failed to save entry collection: {str(e)}") from e

    def clear(self) -> None:
        """
        Remove the stored entry collection.

        Raises:
            StorageError: If the item could not be deleted
        """
        try:
            self.dynamo.delete_item(self._key())
            logger.info("Cleared entry collection", extra={
                "collection_id": self.collection_id
            })
        except (BotoCoreError, ClientError) as e:
            logger.exception("Failed to clear entry collection", exc_info=e, extra={
                "collection_id": self.collection_id
            })
            raise StorageError(f"Failed to clear entry collection: {str(e)}") from e
