"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from pe_calculator.config import Settings
from pe_calculator.containers import AppContainer, build_container
from pe_calculator.domain.recipe import Ingredient
from pe_calculator.services.sync import AddressBar


@dataclass
class RecordingAddressBar(AddressBar):
    """Address bar that records every write."""

    fragment: str = ""
    writes: list[tuple[str, bool]] = field(default_factory=list)

    def get_fragment(self) -> str:
        return self.fragment

    def set_fragment(self, fragment: str, replace_no_history: bool) -> None:
        self.fragment = fragment
        self.writes.append((fragment, replace_no_history))


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url="https://pe.example/calc", debug=True, _env_file=None)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def address_bar() -> RecordingAddressBar:
    return RecordingAddressBar()


@pytest.fixture
def chicken() -> Ingredient:
    return Ingredient(
        id=0, name="Chicken", protein="20", fat="5", net_carbs="2", servings="1"
    )
