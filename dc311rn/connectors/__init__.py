from typing import Any

from .component import ConnectorComponent
from .types import ReplyTransport, TimelineSource

_REGISTRY = {
    "twitter",
}


class ConnectorFactory:
    @staticmethod
    def get_connector(name: str) -> type[ConnectorComponent]:
        if name not in _REGISTRY:
            raise ValueError(f"Unknown connector: {name}")

        module_path = f"dc311rn.connectors.{name.lower()}.client"
        connector_name = f"{name.capitalize()}Connector"
        connector_module = __import__(module_path, fromlist=[connector_name])

        return getattr(connector_module, connector_name)

    @staticmethod
    def from_config(config: dict[str, Any]) -> ConnectorComponent:
        provider = config.get("provider", "twitter")
        try:
            connector = ConnectorFactory.get_connector(provider)
        except Exception as e:
            raise ValueError(f"Error creating connector: {e}") from e

        return connector.from_config(config)


__all__ = [
    "ConnectorComponent",
    "ConnectorFactory",
    "ReplyTransport",
    "TimelineSource",
]
