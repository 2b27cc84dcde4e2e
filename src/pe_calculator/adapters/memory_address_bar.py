"""In-memory address bar for hosts without a browser location."""

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from pe_calculator.services.sync import AddressBar


@dataclass
class InMemoryAddressBar(AddressBar):
    """Address bar that records the fragment and its history entries."""

    fragment: str = ""
    history: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.history:
            self.history.append(self.fragment)

    @classmethod
    def from_url(cls, url: str) -> "InMemoryAddressBar":
        """Create an address bar positioned at a URL or a bare fragment."""
        if url.startswith("#"):
            return cls(fragment=url)
        fragment = urlsplit(url).fragment
        return cls(fragment=f"#{fragment}" if fragment else "")

    def get_fragment(self) -> str:
        return self.fragment

    def set_fragment(self, fragment: str, replace_no_history: bool) -> None:
        self.fragment = fragment
        if replace_no_history:
            self.history[-1] = fragment
        else:
            self.history.append(fragment)
