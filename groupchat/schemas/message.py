"""Message Schemas — the full message record returned by send and list."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer


class MessageRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    group_id: int
    user_id: int
    message: str
    timestamp: datetime

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return value.isoformat()
