from cep_relay.config.config import (
    FrontSettings,
    RelaySettings,
    ServiceSettings,
    get_front_settings,
    get_relay_settings,
)

__all__ = [
    "FrontSettings",
    "RelaySettings",
    "ServiceSettings",
    "get_front_settings",
    "get_relay_settings",
]
