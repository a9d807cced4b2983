from dataclasses import dataclass, field
from typing import Any


@dataclass
class Event:
    id: str | None
    object: str | None
    type: str | None = None  # "invoice.paid", "charge.refunded", etc.
    created: int | None = None
    livemode: bool | None = None
    api_version: str | None = None
    pending_webhooks: int | None = None
    data: dict = field(default_factory=dict)
    request: dict | str | None = None
    values: dict = field(default_factory=dict, repr=False)

    @classmethod
    def construct_from(cls, values: dict[str, Any]) -> "Event":
        """Build an Event from a parsed JSON object. Unknown keys stay in values."""
        return cls(
            id=values.get("id"),
            object=values.get("object"),
            type=values.get("type"),
            created=values.get("created"),
            livemode=values.get("livemode"),
            api_version=values.get("api_version"),
            pending_webhooks=values.get("pending_webhooks"),
            data=values.get("data") or {},
            request=values.get("request"),
            values=dict(values),
        )

    @property
    def data_object(self) -> Any:
        return self.data.get("object") if isinstance(self.data, dict) else None

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.values[key]
