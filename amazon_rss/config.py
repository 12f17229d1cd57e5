"""Configuration management for Amazon RSS rendering."""

import os
from dataclasses import dataclass

from .logging_config import setup_structured_logging

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class SerializerConfig:
    """Output settings for the XML serializer."""

    indent: str = "  "
    encoding: str = "UTF-8"
    xml_declaration: bool = True


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.indent = os.getenv("AMAZON_RSS_INDENT", "  ")
        self.encoding = os.getenv("AMAZON_RSS_ENCODING", "UTF-8")
        self.xml_declaration = self._parse_bool(
            "AMAZON_RSS_XML_DECLARATION",
            os.getenv("AMAZON_RSS_XML_DECLARATION", "true"),
        )
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def _parse_bool(name: str, raw: str) -> bool:
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ValueError(f"Invalid boolean for {name}: {raw!r}")

    def get_serializer_config(self) -> SerializerConfig:
        """Get serializer configuration."""
        return SerializerConfig(
            indent=self.indent,
            encoding=self.encoding,
            xml_declaration=self.xml_declaration,
        )

    def setup_logging(self) -> None:
        """Install structured logging at the configured LOG_LEVEL."""
        setup_structured_logging(self.log_level)
