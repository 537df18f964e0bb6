"""A string binding that follows an MQTT topic."""

from __future__ import annotations

from typing import Any

from paho.mqtt.client import MQTT_ERR_SUCCESS, error_string

from .binding import StringCloser


def _rc_of(result: Any) -> int:
    return result[0] if isinstance(result, tuple) else result


class MqttString(StringCloser):
    """Holds the payload of the latest message on a topic; setting publishes."""

    def __init__(self, client: Any, topic: str) -> None:
        super().__init__("")
        self._client = client
        self.topic = topic
        self._error: Exception | None = None

    def _received(self, _client: Any, _userdata: Any, message: Any) -> None:
        payload = message.payload
        if isinstance(payload, (bytes, bytearray)):
            payload = bytes(payload).decode("utf-8", errors="replace")
        super().set(payload)

    def get(self) -> str:
        """Return the latest payload, or raise the error of the last publish."""
        if self._error is not None:
            raise self._error
        return super().get()

    def set(self, value: str) -> None:
        """Publish ``value`` on the topic and wait until it is sent."""
        if self._client is None:
            raise ConnectionError("binding is closed")
        info = self._client.publish(self.topic, value, qos=0, retain=False)
        error: Exception | None = None
        if info.rc != MQTT_ERR_SUCCESS:
            error = ConnectionError(error_string(info.rc))
        else:
            try:
                info.wait_for_publish()
            except (RuntimeError, ValueError) as exc:
                error = ConnectionError(str(exc))
        self._error = error
        if error is not None:
            raise error

    def close(self) -> None:
        """Unsubscribe from the topic. Closing twice is harmless."""
        if self._client is None:
            return
        self._client.message_callback_remove(self.topic)
        self._client.unsubscribe(self.topic)
        self._client = None
        super().close()


def new_mqtt_string(client: Any, topic: str) -> MqttString:
    """Subscribe a connected client to ``topic`` and return a binding to its messages."""
    binding = MqttString(client, topic)
    client.message_callback_add(topic, binding._received)
    rc = _rc_of(client.subscribe(topic, qos=1))
    if rc != MQTT_ERR_SUCCESS:
        client.message_callback_remove(topic)
        raise ConnectionError(error_string(rc))
    return binding