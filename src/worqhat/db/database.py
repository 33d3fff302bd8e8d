"""
Document database client.

``Database`` hands out cached ``Collection`` handles, a ``Collection`` builds
queries by chaining and hands out cached ``Document`` handles. Every remote
call goes through the owning client's retrying request function.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union

from ..config import get_logger
from ..core.validation import require_fields, validate_choice, validate_collection_schema
from ..exceptions import InvalidInputError
from ..models import ArrayAdd, ArrayRemove, Increment, UpdateOperation, WhereClause, clauses_to_payload

if TYPE_CHECKING:
    from ..client import Result, WorqHatClient

logger = get_logger("db")

JOIN_OPERATORS = ("and", "or")
ORDER_DIRECTIONS = ("asc", "desc")
FETCH_OUTPUT_TYPES = ("json", "stream")


class _Remote:
    def __init__(self, client: "WorqHatClient"):
        self._client = client

    async def _post(self, route: str, body: Dict[str, Any], action: str, stream: bool = False) -> "Result":
        return await self._client.request(
            "POST", f"/api/collections/{route}", json=body, stream=stream, action=action
        )


class Document(_Remote):
    """
    Handle on one document of a collection.

    ``data`` is a local shadow of the fields written through this handle;
    plain values passed to ``update`` are merged into it before sending.
    """

    def __init__(self, client: "WorqHatClient", collection: str, doc_id: str):
        super().__init__(client)
        self.collection = collection
        self.id = doc_id
        self.data: Dict[str, Any] = {}

    async def add(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        self.data = dict(data)
        return await self._post(
            "data/add",
            {"collection": self.collection, "docId": self.id, "data": self.data},
            action="Database Add",
        )

    async def update(self, data: Mapping[str, Union[UpdateOperation, Any]]) -> Dict[str, Any]:
        """Apply field updates in order.

        Array and increment operations are sent to their own routes as they
        are met. Plain values are merged into the shadow and sent in one
        final update, whose result is returned; when there are none the
        result of the last operation is returned.
        """
        result = None
        plain = False

        for field, value in data.items():
            if isinstance(value, ArrayAdd):
                result = await self._array_update("add", "arrayUnion", field, value.elements)
            elif isinstance(value, ArrayRemove):
                result = await self._array_update("remove", "arrayRemove", field, value.elements)
            elif isinstance(value, Increment):
                result = await self._post(
                    "data/increment",
                    self._field_body(field, increment=value.amount),
                    action="Database Increment",
                )
            else:
                self.data[field] = value
                plain = True

        if plain or result is None:
            result = await self._post(
                "data/update",
                {"collection": self.collection, "docId": self.id, "data": self.data},
                action="Database Update",
            )
        return result

    async def delete(self) -> Dict[str, Any]:
        return await self._post(
            "data/delete",
            {"collection": self.collection, "docId": self.id},
            action="Database Delete",
        )

    async def get(self) -> Dict[str, Any]:
        return await self._post(
            "data/fetch/document",
            {"collection": self.collection, "documentId": self.id},
            action="Database Fetch Document",
        )

    def _field_body(self, field: str, **extra: Any) -> Dict[str, Any]:
        return {"collection": self.collection, "docId": self.id, "field": field, **extra}

    async def _array_update(self, kind: str, key: str, field: str, elements: Any) -> Dict[str, Any]:
        return await self._post(
            f"data/array/update/{kind}",
            self._field_body(field, **{key: elements}),
            action=f"Database Array {kind.title()}",
        )


class Collection(_Remote):
    """
    Handle on a named collection with a chainable query builder.

    Example:
        >>> await client.db.collection("users").where("age", ">", 21).join("or").limit(10).get()

    Builder state is cleared after each ``get`` or ``execute`` call.
    """

    def __init__(self, client: "WorqHatClient", name: str):
        super().__init__(client)
        self.name = name
        self.documents: Dict[str, Document] = {}
        self._reset_query()

    def _reset_query(self) -> None:
        self._language_query = ""
        self._where: List[WhereClause] = []
        self._join = "AND"
        self._order_by = ""
        self._order_direction = "asc"
        self._limit: Optional[int] = None
        self._start_after: Optional[int] = None
        self._unique_column = ""

    async def create(
        self, schema: Optional[Mapping[str, str]] = None, order_by: Optional[str] = None
    ) -> Dict[str, Any]:
        """Declare the collection schema. Checked locally, nothing is sent."""
        if not schema:
            return {
                "code": 200,
                "message": "Collection without schema created successfully",
                "data": {"name": self.name},
            }

        validated = validate_collection_schema(schema)
        logger.debug("Collection %s: schema accepted (order by %r)", self.name, order_by)
        return {
            "code": 200,
            "message": "Collection schemas created successfully",
            "data": {"name": self.name, "schema": validated},
        }

    async def delete(self) -> Dict[str, Any]:
        return await self._post(
            "secure-end/delete", {"collection": self.name}, action="Delete Collection"
        )

    async def add(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Add a document with a server generated id."""
        return await self._post(
            "data/add",
            {"collection": self.name, "docId": None, "data": dict(data)},
            action="Database Add",
        )

    async def get_all(self, output_type: str = "json") -> "Result":
        output = validate_choice("Output type", output_type, FETCH_OUTPUT_TYPES)
        return await self._post(
            "data/fetch/all",
            {"collection": self.name},
            action="Database Fetch",
            stream=output == "stream",
        )

    async def get_count(self, column: Optional[str] = None) -> Dict[str, Any]:
        require_fields([("Column", column)])
        return await self._post(
            "data/fetch/count",
            {"collection": self.name, "key": column},
            action="Database Count",
        )

    def language(self, query: str) -> "Collection":
        self._language_query = query
        return self

    def where(self, field: str, operator: str, value: Any) -> "Collection":
        self._where.append(WhereClause(field, operator, value))
        return self

    def join(self, operator: str) -> "Collection":
        self._join = validate_choice("Join operator", operator, JOIN_OPERATORS).upper()
        return self

    def order_by(self, column: str, direction: str = "asc") -> "Collection":
        self._order_by = column
        self._order_direction = validate_choice("Order direction", direction, ORDER_DIRECTIONS)
        return self

    def limit(self, count: int) -> "Collection":
        self._limit = count
        return self

    def start_after(self, offset: int) -> "Collection":
        self._start_after = offset
        return self

    def get_unique(self, column: str) -> "Collection":
        self._unique_column = column
        return self

    async def get(self) -> Dict[str, Any]:
        """Run the built query.

        A natural language query wins over where clauses; with neither the
        whole collection is fetched.
        """
        try:
            if self._language_query:
                return await self._post(
                    "data/fetch/natural-query",
                    {"collection": self.name, "query": self._language_query},
                    action="Database Natural Query",
                )
            if self._where:
                return await self._post(
                    "data/fetch/query",
                    {
                        "collection": self.name,
                        "queries": clauses_to_payload(self._where),
                        "compounding": self._join,
                        "orderType": self._order_direction if self._order_by else None,
                        "orderBy": self._order_by or None,
                        "limit": self._limit,
                        "startAfter": self._start_after,
                    },
                    action="Database Query",
                )
            return await self.get_all()
        finally:
            self._reset_query()

    async def execute(self) -> Dict[str, Any]:
        """Fetch the distinct values of the ``get_unique`` column."""
        try:
            if not self._unique_column:
                raise InvalidInputError("Please specify a unique column.", {"field": "unique_column"})

            return await self._post(
                "data/fetch/unique",
                {
                    "collection": self.name,
                    "key": self._unique_column,
                    "orderBy": self._order_by,
                    "orderType": self._order_direction,
                },
                action="Database Unique",
            )
        finally:
            self._reset_query()

    def doc(self, doc_id: str) -> Document:
        if doc_id not in self.documents:
            self.documents[doc_id] = Document(self._client, self.name, doc_id)
        return self.documents[doc_id]


class Database:
    """Entry point of the document database."""

    def __init__(self, client: "WorqHatClient"):
        self._client = client
        self.collections: Dict[str, Collection] = {}

    def collection(self, name: str) -> Collection:
        require_fields([("Collection Name", name)])
        if name not in self.collections:
            self.collections[name] = Collection(self._client, name)
        return self.collections[name]

    @staticmethod
    def array_add(elements: Any) -> ArrayAdd:
        return ArrayAdd(elements)

    @staticmethod
    def array_remove(elements: Any) -> ArrayRemove:
        return ArrayRemove(elements)

    @staticmethod
    def increment(amount: Union[int, float]) -> Increment:
        return Increment(amount)
