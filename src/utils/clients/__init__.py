"""
Centralized client initialization module.

This module provides lazy-loaded shared clients for the application.
"""
import threading
from aws_lambda_powertools import Logger
from src.services.constants import DEFAULT_COLLECTION_ID
from src.services.repository import EntryRepository
from src.utils.dynamo import get_dynamo
from src.utils.storage import DynamoEntryStore

logger = Logger()

# Initialize shared clients (lazy loading)
_repositories = {}
_repositories_lock = threading.Lock()

def get_repository(collection_id: str = DEFAULT_COLLECTION_ID) -> EntryRepository:
    """
    Get or create the DynamoDB-backed repository for a collection.

    Args:
        collection_id: Entry collection to manage

    Returns:
        Shared EntryRepository instance for that collection
    """
    with _repositories_lock:
        if collection_id not in _repositories:
            logger.info("Creating entry repository", extra={"collection_id": collection_id})
            store = DynamoEntryStore(get_dynamo(), collection_id)
            _repositories[collection_id] = EntryRepository(store)
        return _repositories[collection_id]

def reset_clients() -> None:
    """Drop cached repositories."""
    with _repositories_lock:
        _repositories.clear()
