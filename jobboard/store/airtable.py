"""Airtable record store client."""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from jobboard.domain.models import StoreRecord
from jobboard.logging import get_logger
from jobboard.utils.timestamps import parse_iso_datetime

from .base import BaseStoreClient
from .exceptions import StoreConfigurationError, StoreHTTPError, StoreResponseError

logger = get_logger(__name__, component="store")

ACTIVE_FILTER = "{status}='active'"

# Guard against a store that keeps handing back offsets
MAX_PAGES = 1000


class AirtableClient(BaseStoreClient):
    """Client for the Airtable REST API.

    API Details:
        List:   GET {api_url}/{base_id}/{table}?filterByFormula=...&sort[0][field]=...
        Record: GET {api_url}/{base_id}/{table}/{record_id}
        Auth:   Bearer personal access token
        Paging: response carries ``offset`` while more pages remain
    """

    STORE_NAME = "airtable"

    def __init__(
        self,
        access_token: str,
        base_id: str,
        table_name: str = "Jobs",
        api_url: str = "https://api.airtable.com/v0",
        page_size: int = 100,
        timeout: int = 30,
        user_agent: str = "JobBoard/1.0",
    ) -> None:
        super().__init__(timeout=timeout, user_agent=user_agent)

        if not access_token or not base_id:
            raise StoreConfigurationError("Airtable access token and base id are required")
        if not table_name:
            raise StoreConfigurationError("Airtable table name cannot be empty")

        self.base_id = base_id
        self.table_name = table_name
        self.api_url = api_url.rstrip("/")
        self.page_size = page_size
        self._session.headers.update({"Authorization": f"Bearer {access_token}"})

    @property
    def table_url(self) -> str:
        return f"{self.api_url}/{self.base_id}/{quote(self.table_name, safe='')}"

    def list_active_records(self) -> List[StoreRecord]:
        """Fetch every active record sorted by posted_date, newest first.

        Follows ``offset`` pagination until the store stops returning one.
        """
        records: List[StoreRecord] = []
        offset: Optional[str] = None

        for page_number in range(1, MAX_PAGES + 1):
            params = [
                ("filterByFormula", ACTIVE_FILTER),
                ("sort[0][field]", "posted_date"),
                ("sort[0][direction]", "desc"),
                ("pageSize", str(self.page_size)),
            ]
            if offset:
                params.append(("offset", offset))

            data = self._make_request(self.table_url, params=params)

            raw_records = data.get("records", [])
            if not isinstance(raw_records, list):
                raise StoreResponseError(
                    f"Expected 'records' field to be array, got {type(raw_records).__name__}"
                )

            records.extend(self._parse_records(raw_records))

            offset = data.get("offset")
            if not offset:
                break
        else:
            logger.warning(
                "Stopped following pagination offsets",
                extra={"event": "store.fetch.page_limit", "pages": MAX_PAGES},
            )

        logger.info(
            "Fetched records from Airtable",
            extra={
                "event": "store.fetch.completed",
                "store": self.STORE_NAME,
                "table": self.table_name,
                "count": len(records),
                "pages": page_number,
            },
        )
        return records

    def get_record(self, record_id: str) -> Optional[StoreRecord]:
        """Fetch one record by id; None when Airtable reports 404."""
        url = f"{self.table_url}/{quote(record_id, safe='')}"

        try:
            data = self._make_request(url)
        except StoreHTTPError as e:
            if e.is_not_found:
                logger.info(
                    "Record not found",
                    extra={"event": "store.record.not_found", "record_id": record_id},
                )
                return None
            raise

        return self._parse_record(data)

    def ping(self) -> None:
        """Read at most one record to prove the base and token work."""
        self._make_request(self.table_url, params={"maxRecords": "1", "pageSize": "1"})

    def _parse_records(self, raw_records: List[Any]) -> List[StoreRecord]:
        parsed = []
        for raw in raw_records:
            try:
                parsed.append(self._parse_record(raw))
            except StoreResponseError as e:
                logger.warning(
                    "Skipping malformed record",
                    extra={"event": "store.record.malformed", "error": str(e)},
                )
        return parsed

    @staticmethod
    def _parse_record(raw: Any) -> StoreRecord:
        if not isinstance(raw, dict) or not str(raw.get("id") or "").strip():
            raise StoreResponseError("Record is missing its id")

        fields: Dict[str, Any] = raw.get("fields") or {}
        if not isinstance(fields, dict):
            raise StoreResponseError(f"Record {raw['id']} has non-object fields")

        return StoreRecord(
            id=str(raw["id"]),
            created_time=parse_iso_datetime(raw.get("createdTime")),
            fields=fields,
        )
