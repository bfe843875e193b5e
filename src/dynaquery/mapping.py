"""Map raw DynamoDB records to entities."""

from typing import Any, Dict, List, Optional, Type

from boto3.dynamodb.types import TypeDeserializer
from pydantic import BaseModel

from .abc import Collection
from .types import RawRecord


class EntityCollection(Collection):
    """Deserialize typed records into pydantic entities, or plain dicts.

    Numbers come back from DynamoDB as ``Decimal``; pydantic coerces them when
    the entity declares ``int`` or ``float`` fields.
    """

    def __init__(self, entity: Optional[Type[BaseModel]] = None) -> None:
        self.entity = entity
        self._deserializer = TypeDeserializer()

    def decode(self, record: RawRecord) -> Dict[str, Any]:
        return {name: self._deserializer.deserialize(value) for name, value in record.items()}

    def deserialize(self, records: List[RawRecord]) -> List[Any]:
        decoded = [self.decode(record) for record in records]
        if self.entity is None:
            return decoded
        return [self.entity.model_validate(item) for item in decoded]
