"""Observable bindings, JSON, MQTT and WebSocket bindings, and password validation."""

__all__ = ["binding", "jsonbinding", "mqttstring", "validation", "webstring"]