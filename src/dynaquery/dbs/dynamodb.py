"""Concrete dataset for Amazon DynamoDB.

This module provides the DynamoDB implementation of the Dataset interface,
running the scan and query requests built by :class:`~dynaquery.querydsl.Query`
through a boto3 low-level client.

Key Features:
    - Lazy client initialization from settings
    - Key schema introspection (table, GSIs and LSIs) via DescribeTable, cached
    - Value encoding through boto3's TypeSerializer
    - Pagination over LastEvaluatedKey until exhausted or the limit is matched
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Set

import boto3
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from dynaquery.abc import Dataset
from dynaquery.constants import Operation
from dynaquery.exceptions import IndexNotFoundError, MissingConfigError, TableNotFoundError
from dynaquery.schema import QueryOptions, ResultSet
from dynaquery.settings import settings as api_settings
from dynaquery.types import TypedValue

TABLE_KEY = None  # key schema slot for the base table


class DynamoDBDataset(Dataset):
    """Dataset adapter for a single DynamoDB table.

    Attributes:
        table_name: Physical table name (settings prefix applied)
        client: boto3 DynamoDB client, created on first use
    """

    def __init__(self, table_name: str, client: Any | None = None, **kwargs: Any) -> None:
        """Initialize the dataset.

        Args:
            table_name: Logical table name; ``DYNAMODB_TABLE_PREFIX`` is prepended
            client: Optional preconfigured boto3 DynamoDB client
        """
        super().__init__(f"{api_settings.DYNAMODB_TABLE_PREFIX}{table_name}", **kwargs)
        self._client = client
        self._serializer = TypeSerializer()
        self._key_schema: Dict[Optional[str], Set[str]] | None = None

    @property
    def client(self) -> Any:
        """Lazily initialize and return the boto3 client.

        Raises:
            MissingConfigError: If AWS_REGION is not configured
        """
        if self._client is None:
            if not api_settings.AWS_REGION:
                raise MissingConfigError(
                    "AWS_REGION is not set. Please configure it in your .env file.",
                    config_key="AWS_REGION",
                    env_file=".env",
                )
            self._client = boto3.client(
                "dynamodb",
                region_name=api_settings.AWS_REGION,
                endpoint_url=api_settings.DYNAMODB_ENDPOINT_URL,
                aws_access_key_id=api_settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=api_settings.AWS_SECRET_ACCESS_KEY,
                aws_session_token=api_settings.AWS_SESSION_TOKEN,
            )
            self.logger.message("DynamoDB client initialized: region=%s", api_settings.AWS_REGION)
        return self._client

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    @property
    def key_schema(self) -> Dict[Optional[str], Set[str]]:
        """Key attribute names per index, ``None`` standing for the table itself."""
        if self._key_schema is None:
            self._key_schema = self._describe_key_schema()
        return self._key_schema

    def _describe_key_schema(self) -> Dict[Optional[str], Set[str]]:
        try:
            table = self.client.describe_table(TableName=self.table_name)["Table"]
        except ClientError as err:
            if err.response.get("Error", {}).get("Code") == "ResourceNotFoundException":
                raise TableNotFoundError("Table not found", table_name=self.table_name) from err
            raise

        schema: Dict[Optional[str], Set[str]] = {TABLE_KEY: {k["AttributeName"] for k in table["KeySchema"]}}
        for index in table.get("GlobalSecondaryIndexes", []) + table.get("LocalSecondaryIndexes", []):
            schema[index["IndexName"]] = {k["AttributeName"] for k in index["KeySchema"]}
        self.logger.debug("Key schema for %s: %s", self.table_name, schema)
        return schema

    def key(self, attribute: str, index_name: Optional[str] = None) -> bool:
        """Whether ``attribute`` is a hash or range key of ``index_name``.

        Raises:
            IndexNotFoundError: If the table has no such index
        """
        schema = self.key_schema
        if index_name not in schema:
            raise IndexNotFoundError("Index not found", table_name=self.table_name, index_name=index_name)
        return str(attribute) in schema[index_name]

    def format_attribute_value(self, value: Any) -> TypedValue:
        if isinstance(value, float):
            value = Decimal(str(value))
        return self._serializer.serialize(value)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def scan(self, options: QueryOptions) -> ResultSet:
        return self._fetch(Operation.SCAN, options)

    def query(self, options: QueryOptions) -> ResultSet:
        return self._fetch(Operation.QUERY, options)

    # Request fields the API accepts for one operation only
    _QUERY_ONLY = ("KeyConditions", "QueryFilter", "ScanIndexForward")
    _SCAN_ONLY = ("ScanFilter",)

    def build_request(self, options: QueryOptions, operation: str = Operation.SCAN) -> Dict[str, Any]:
        """Dump ``options`` into a request for ``operation``.

        Fields the other operation owns are dropped, so a scan filter picked
        up before a query was promoted never reaches the Query API.
        """
        request = options.to_request()
        for field in self._SCAN_ONLY if operation == Operation.QUERY else self._QUERY_ONLY:
            request.pop(field, None)
        request["TableName"] = self.table_name
        return request

    def _fetch(self, operation: str, options: QueryOptions) -> ResultSet:
        """Run the request, following pages until exhausted or ``limit`` items matched.

        ``Limit`` caps the items DynamoDB evaluates per page, so a filtered
        page can come back empty while later pages still hold matches.
        Client errors propagate unchanged.
        """
        request = self.build_request(options, operation)
        send = self.client.scan if operation == Operation.SCAN else self.client.query
        limit = options.limit

        entries: List[Dict[str, Any]] = []
        count = 0
        scanned_count = 0
        while True:
            self.logger.debug("%s %s", operation, request)
            response = send(**request)
            entries.extend(response.get("Items", []))
            count += response.get("Count", 0)
            scanned_count += response.get("ScannedCount", 0)

            last_key = response.get("LastEvaluatedKey")
            if not last_key or (limit is not None and count >= limit):
                break
            request["ExclusiveStartKey"] = last_key

        if limit is not None:
            entries = entries[:limit]
            count = min(count, limit)

        self.logger.message("%s %s: count=%d scanned=%d", operation, self.table_name, count, scanned_count)
        return ResultSet(entries=entries, count=count, scanned_count=scanned_count)
