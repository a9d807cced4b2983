import json
import time
import uuid


class EventPayloadFactory:
    """Factory for raw webhook payloads with sensible defaults."""

    @staticmethod
    def create_data(event_type: str = "invoice.paid", **overrides) -> dict:
        object_overrides = overrides.pop("object_data", None)

        defaults = {
            "id": f"evt_{uuid.uuid4().hex[:16]}",
            "object": "event",
            "type": event_type,
            "created": int(time.time()),
            "livemode": False,
            "api_version": "2017-05-25",
            "pending_webhooks": 1,
            "request": None,
            "data": {"object": EventPayloadFactory._build_object(event_type)},
        }
        if object_overrides:
            defaults["data"]["object"].update(object_overrides)
        defaults.update(overrides)
        return defaults

    @staticmethod
    def create(event_type: str = "invoice.paid", indent: int | None = None, **overrides) -> bytes:
        """Serialize a payload to the bytes a sender would put on the wire."""
        data = EventPayloadFactory.create_data(event_type, **overrides)
        return json.dumps(data, indent=indent).encode("utf-8")

    @staticmethod
    def _build_object(event_type: str) -> dict:
        resource = event_type.split(".", 1)[0]
        base = {
            "id": f"{_resource_prefix(resource)}_{uuid.uuid4().hex[:16]}",
            "object": resource,
        }

        if resource == "charge":
            base["amount"] = 1000
            base["currency"] = "usd"
            base["refunded"] = event_type == "charge.refunded"
        elif resource == "invoice":
            base["amount_paid"] = 1000
            base["currency"] = "usd"
            base["paid"] = event_type == "invoice.paid"
        elif resource == "customer":
            base["email"] = "jenny.rosen@example.com"

        return base


def _resource_prefix(resource: str) -> str:
    mapping = {
        "charge": "ch",
        "invoice": "in",
        "customer": "cus",
    }
    return mapping.get(resource, "obj")
