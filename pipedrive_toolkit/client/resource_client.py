"""
Generic resource client.

One ResourceClient serves one resource type. The descriptor supplies
the URL path; every type shares the same CRUD and pagination logic.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from pipedrive_toolkit.core.models import (
    ApiResponse,
    PaginationLimitError,
    Record,
    ResourceDescriptor,
    ResponseError,
    UnknownError,
)
from pipedrive_toolkit.transport.base import ConnectionFailure, HttpTransport

logger = logging.getLogger(__name__)


class ResourceClient:
    """
    CRUD engine for a single resource type.

    Operations:
    - list / all: paginated listing
    - create, find, find_by_name, update, destroy

    Failures raise TransportError subclasses, except update, which
    reports failure by returning False.
    """

    def __init__(
        self,
        descriptor: ResourceDescriptor,
        transport: HttpTransport,
        api_token: str | None = None,
        max_pages: int = 1000,
    ):
        """
        Initialize the resource client.

        Args:
            descriptor: Resource type metadata (provides the path)
            transport: HTTP transport used for every request
            api_token: Default auth token for calls without an explicit one
            max_pages: Upper bound on pages fetched by a single listing
        """
        self.descriptor = descriptor
        self.transport = transport
        self.api_token = api_token
        self.max_pages = max_pages

    def __repr__(self) -> str:
        return f"<ResourceClient {self.descriptor.name} {self.resource_path}>"

    @property
    def resource_path(self) -> str:
        return self.descriptor.path

    def authenticate(self, token: str | None) -> None:
        """Set the default auth token for this client."""
        self.api_token = token

    def _token(self, api_token: str | None) -> str | None:
        return api_token if api_token is not None else self.api_token

    def _query(self, api_token: str | None, query: dict[str, Any] | None = None) -> dict[str, Any]:
        params = dict(query or {})
        token = self._token(api_token)
        if token:
            params["api_token"] = token
        return params

    def _send(self, method: str, path: str, options: dict[str, Any], context: Any) -> ApiResponse:
        try:
            return getattr(self.transport, method)(path, options)
        except ConnectionFailure as e:
            self.bad_response(None, context, cause=e)

    def bad_response(self, response: Any, context: Any = None, cause: Exception | None = None) -> NoReturn:
        """
        Examine a failed request and raise the matching error.

        Args:
            response: ApiResponse, or None when no response was received
            context: Request details kept for diagnostics (id, name, fields)

        Raises:
            ResponseError: The server sent a structured failure response
            UnknownError: No structured response is available
        """
        logger.debug(f"Bad response for {self.resource_path}: {response!r} context={context!r}")
        if isinstance(response, ApiResponse):
            raise ResponseError(response, context) from cause
        raise UnknownError(context) from cause

    def _records(self, response: ApiResponse, context: Any) -> list[Record]:
        data = response.get("data")
        if not isinstance(data, list):
            return []

        # Every item must be an object
        if not all(isinstance(item, dict) for item in data):
            logger.warning(f"Non-object items in {self.resource_path} data: {data!r}")
            self.bad_response(response, context)
        return [Record(item, client=self) for item in data]

    def list(
        self,
        api_token: str | None = None,
        fetch_all: bool = True,
        options: dict[str, Any] | None = None,
    ) -> list[Record]:
        """
        List records of this resource.

        Args:
            api_token: Auth token (defaults to the client token)
            fetch_all: Follow pagination until the server reports no more items
            options: Request options; options["query"] is sent as query params

        Returns:
            Records from every page, in server order

        Raises:
            ResponseError / UnknownError: A page request failed
            PaginationLimitError: More than max_pages pages were reported
        """
        options = dict(options or {})
        query = self._query(api_token, options.get("query"))
        records: list[Record] = []
        pages = 0

        while True:
            page_options = {**options, "query": dict(query)}
            response = self._send("get", self.resource_path, page_options, page_options)
            if not response.success:
                self.bad_response(response, page_options)

            records.extend(self._records(response, page_options))
            pages += 1
            logger.debug(f"Fetched page {pages} of {self.resource_path} ({len(records)} records so far)")

            if not (fetch_all and response.has_more_items):
                return records

            if pages >= self.max_pages:
                logger.warning(f"Stopped listing {self.resource_path} after {pages} pages")
                raise PaginationLimitError(self.max_pages, records, context=page_options)

            query["start"] = response.next_start

    all = list

    def create(self, fields: dict[str, Any], api_token: str | None = None) -> Record:
        """
        Create a new record.

        The caller's fields are kept unless the server echoes a different
        value for the same key.
        """
        response = self._send(
            "post",
            self.resource_path,
            {"query": self._query(api_token), "body": fields},
            fields,
        )
        if not response.success:
            self.bad_response(response, fields)

        data = dict(fields)
        echoed = response.get("data")
        if isinstance(echoed, dict):
            data.update(echoed)
        return Record.from_envelope(
            {"data": data, "additional_data": response.get("additional_data")},
            client=self,
        )

    def find(self, id: Any, api_token: str | None = None) -> Record:
        """Fetch a single record by id."""
        context = {"id": id}
        response = self._send(
            "get",
            f"{self.resource_path}/{id}",
            {"query": self._query(api_token)},
            context,
        )
        if not response.success:
            self.bad_response(response, context)

        return Record.from_envelope(response, client=self)

    def find_by_name(
        self,
        name: str,
        api_token: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> list[Record]:
        """
        Search records by name.

        Extra options are sent as query params next to the search term.
        A response without a data array yields an empty list.
        """
        options = dict(options or {})
        context = {"name": name, **options}
        query = self._query(api_token, {"term": name, **options})
        response = self._send("get", f"{self.resource_path}/find", {"query": query}, context)
        if not response.success:
            self.bad_response(response, context)

        return self._records(response, context)

    def update(self, record: Record, fields: dict[str, Any], api_token: str | None = None) -> bool:
        """
        Update a record on the server and merge the confirmed values into it.

        Returns:
            True on success, False when the server rejected the update
            or could not be reached; the record is left untouched then
        """
        if record.get("id") is None:
            logger.warning(f"Cannot update a {self.descriptor.name} record without an id")
            return False

        path = f"{self.resource_path}/{record.get('id')}"
        try:
            response = self.transport.put(path, {"query": self._query(api_token), "body": fields})
        except ConnectionFailure as e:
            logger.warning(f"Update of {path} failed: {e}")
            return False

        if not response.success:
            logger.warning(f"Update of {path} rejected with status {response.status_code}")
            return False

        data = response.get("data")
        if isinstance(data, dict):
            record.merge(data)
        return True

    def destroy(self, id: Any, api_token: str | None = None) -> None:
        """
        Delete a record by id.

        The api_token query param is always sent, empty when no token is known.
        """
        context = {"id": id}
        token = self._token(api_token)
        response = self._send(
            "delete",
            f"{self.resource_path}/{id}",
            {"query": {"api_token": token or ""}},
            context,
        )
        if not response.success:
            self.bad_response(response, context)
