"""Configuration classes for keycount components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AggregatorConfig:
    """Configuration for key/frequency line parsing and summary rendering."""

    # Field separator between key and value
    separator: str = ","

    # Marker stripped from every line (byte-order mark / "non-commit" character)
    marker: str = "\ufeff"

    # Number of fields a valid line must split into
    expected_fields: int = 2

    # Phrase rendered for each key in the summary line
    summary_template: str = "The total for {key} is {value}."

    # Separator between rendered phrases
    summary_joiner: str = " "

    def format_entry(self, key: str, value: int) -> str:
        """Render a single key total using the summary template."""
        return self.summary_template.format(key=key, value=value)


# Global configuration instance
DEFAULT_CONFIG = AggregatorConfig()
