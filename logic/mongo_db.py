import os
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.errors import DuplicateKeyError, PyMongoError

from model.models import CaseRow, RemoteResult

load_dotenv()

logger = logging.getLogger(__name__)

CASE_FIELDS = {"_id": 1, "title": 1, "created_at": 1, "created_by": 1}


class MongoDB:
    def __init__(
        self,
        mongo_uri: Optional[str] = None,
        db_name: Optional[str] = None,
        cases_collection: Optional[str] = None,
        responses_collection: Optional[str] = None,
        database=None,
    ):
        self.db_name = db_name or os.getenv("MONGO_DB_NAME", "case_discussion_board")
        self.cases_collection = cases_collection or os.getenv("MONGO_CASES_COLLECTION", "case_config")
        self.responses_collection = responses_collection or os.getenv("MONGO_RESPONSES_COLLECTION", "responses")

        if database is None:
            self.mongo_uri = mongo_uri or os.getenv("MONGO_URI")
            if not self.mongo_uri:
                raise RuntimeError("Missing MONGO_URI in environment or .env file")
            timeout_ms = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
            self.client = MongoClient(self.mongo_uri, serverSelectionTimeoutMS=timeout_ms)
            database = self.client[self.db_name]
        else:
            self.mongo_uri = mongo_uri
            self.client = None

        self.db = database
        self.cases = self.db[self.cases_collection]
        self.responses = self.db[self.responses_collection]

    # -------------------------------------------------------------------------
    # CRUD OPERATIONS
    # -------------------------------------------------------------------------

    def list_cases(self, created_by: str) -> RemoteResult:
        """
        Cases owned by `created_by`, newest first.

        The filter is an exact match on the stored identity string.
        """
        try:
            cursor = self.cases.find({"created_by": created_by}, CASE_FIELDS)
            docs = list(cursor.sort("created_at", DESCENDING))
        except PyMongoError as e:
            logger.warning("Listing cases for %s failed: %s", created_by, e)
            return RemoteResult.failure(str(e))
        return RemoteResult.success([self._to_case_row(doc) for doc in docs])

    def insert_case(self, case_id: str, title: str, created_by: str) -> RemoteResult:
        doc = {
            "_id": case_id,
            "title": title,
            "created_by": created_by,
            "created_at": datetime.now(timezone.utc),
        }
        try:
            self.cases.insert_one(doc)
        except DuplicateKeyError:
            logger.warning("Case with id %s already exists, nothing inserted.", case_id)
            return RemoteResult.failure(f"A case with id '{case_id}' already exists.")
        except PyMongoError as e:
            logger.warning("Inserting case %s failed: %s", case_id, e)
            return RemoteResult.failure(str(e))
        logger.info("Inserted case %s for %s", case_id, created_by)
        return RemoteResult.success([self._to_case_row(doc)])

    def delete_responses(self, case_id: str) -> RemoteResult:
        try:
            result = self.responses.delete_many({"case_id": case_id})
        except PyMongoError as e:
            logger.warning("Deleting responses of case %s failed: %s", case_id, e)
            return RemoteResult.failure(str(e))
        logger.info("Deleted %s responses of case %s", result.deleted_count, case_id)
        return RemoteResult.success()

    def delete_case(self, case_id: str) -> RemoteResult:
        try:
            self.cases.delete_one({"_id": case_id})
        except PyMongoError as e:
            logger.warning("Deleting case %s failed: %s", case_id, e)
            return RemoteResult.failure(str(e))
        logger.info("Deleted case %s", case_id)
        return RemoteResult.success()

    def ensure_indexes(self) -> None:
        """Create the lookup indexes; a failure here is logged and ignored."""
        try:
            self.cases.create_index([("created_by", ASCENDING), ("created_at", DESCENDING)])
            self.responses.create_index([("case_id", ASCENDING)])
        except PyMongoError as e:
            logger.warning("Could not create indexes: %s", e)

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_case_row(doc: Dict[str, Any]) -> CaseRow:
        return CaseRow(
            case_id=str(doc.get("_id")),
            title=doc.get("title", ""),
            created_at=doc.get("created_at"),
            created_by=doc.get("created_by", ""),
        )
