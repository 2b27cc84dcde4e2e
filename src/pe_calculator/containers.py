"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from pe_calculator.adapters.memory_address_bar import InMemoryAddressBar
from pe_calculator.config import Settings
from pe_calculator.services.session import RecipeSession, start_session


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    open_session: Callable[[str], RecipeSession]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()

    def open_session(location: str) -> RecipeSession:
        return start_session(
            InMemoryAddressBar.from_url(location), debug=resolved_settings.debug
        )

    return AppContainer(settings=resolved_settings, open_session=open_session)
