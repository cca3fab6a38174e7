"""Institution reference data."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Institution:
    """Display metadata for a financial provider."""

    id: str
    name: str
    primary_color: str
    url: str
    logo: str | None = None
    products: tuple[str, ...] = field(default_factory=tuple)
    country_codes: tuple[str, ...] = ("US",)
