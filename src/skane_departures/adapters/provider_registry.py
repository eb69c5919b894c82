"""Registry that selects the network provider for a network id."""

import logging
from collections.abc import Callable

from skane_departures.adapters.config.app_config import AppConfig
from skane_departures.adapters.http_transport import RequestsHttpTransport
from skane_departures.domain.exceptions import UnknownNetworkError
from skane_departures.domain.models.network import NetworkId
from skane_departures.domain.ports.http_transport import HttpTransport
from skane_departures.domain.ports.network_provider import NetworkProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[AppConfig, HttpTransport], NetworkProvider]


def _create_skanetrafiken(config: AppConfig, transport: HttpTransport) -> NetworkProvider:
    from skane_departures.adapters.skanetrafiken_api import SkanetrafikenProvider

    return SkanetrafikenProvider(
        transport,
        base_url=config.skanetrafiken_base_url,
        timezone=config.skanetrafiken_timezone,
    )


DEFAULT_FACTORIES: dict[NetworkId, ProviderFactory] = {
    NetworkId.SKANETRAFIKEN: _create_skanetrafiken,
}


class ProviderRegistry:
    """Creates and caches one provider per network."""

    def __init__(
        self,
        config: AppConfig | None = None,
        transport: HttpTransport | None = None,
        factories: dict[NetworkId, ProviderFactory] | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            config: Application configuration, loaded from the environment if omitted.
            transport: Shared transport; a requests-based one is created on first use.
            factories: Provider factories by network, defaults to all known networks.
        """
        self._config = config or AppConfig()
        self._transport = transport
        self._factories = dict(DEFAULT_FACTORIES if factories is None else factories)
        self._providers: dict[NetworkId, NetworkProvider] = {}

    def _get_transport(self) -> HttpTransport:
        if self._transport is None:
            self._transport = RequestsHttpTransport.from_config(self._config)
        return self._transport

    def register(self, network: NetworkId, factory: ProviderFactory) -> None:
        """Register or replace the factory for a network."""
        self._factories[network] = factory
        self._providers.pop(network, None)

    def available_networks(self) -> list[NetworkId]:
        """Networks a provider can be created for, in declaration order."""
        return [network for network in NetworkId if network in self._factories]

    def get(self, network: NetworkId | str) -> NetworkProvider:
        """Return the provider for a network.

        Args:
            network: Network id or its string value (e.g. "skanetrafiken").

        Raises:
            UnknownNetworkError: If no provider is registered for the network.
        """
        network_id = self._resolve(network)
        provider = self._providers.get(network_id)
        if provider is None:
            factory = self._factories.get(network_id)
            if factory is None:
                raise UnknownNetworkError(f"No provider registered for {network_id.value}")
            provider = factory(self._config, self._get_transport())
            self._providers[network_id] = provider
            logger.debug(f"Created provider for {network_id.value}")
        return provider

    @staticmethod
    def _resolve(network: NetworkId | str) -> NetworkId:
        if isinstance(network, NetworkId):
            return network
        try:
            return NetworkId(network.lower())
        except ValueError as e:
            raise UnknownNetworkError(f"Unknown network: {network}") from e
