"""Pydantic configuration models for linkscraper."""

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

DEFAULT_CHUNK_SIZE = 64 * 1024

ScrapeFormat = Literal["auto", "xml", "hrefs", "xlink", "svg", "text"]


class ByteSize(int):
    """
    Custom type that parses human-readable byte sizes.

    Accepts:
        - Integers (bytes)
        - Strings like '200kb', '1mb', '5gb'

    Examples:
        >>> ByteSize._parse('64kb')
        65536
        >>> ByteSize._parse('1mb')
        1048576
        >>> ByteSize._parse(1024)
        1024
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(cls._parse)

    @classmethod
    def _parse(cls, v: Any) -> int:
        if isinstance(v, bool):
            raise ValueError(f"Invalid byte size: {v}")
        if isinstance(v, int):
            if v < 1:
                raise ValueError(f"Byte size must be positive: {v}")
            return v
        if isinstance(v, str):
            v = v.lower().strip()
            # Order matters: check longer suffixes first
            units = [("gb", 1024**3), ("mb", 1024**2), ("kb", 1024), ("b", 1)]
            for unit, mult in units:
                if v.endswith(unit):
                    num_str = v[: -len(unit)].strip()
                    try:
                        return cls._parse(int(float(num_str) * mult))
                    except ValueError as err:
                        raise ValueError(f"Invalid number in byte size: {v}") from err
            try:
                return cls._parse(int(v))
            except ValueError:
                pass
        raise ValueError(f"Invalid byte size: {v}. Use format like '64kb', '1mb', or integer bytes.")


class XLinkConfig(BaseModel):
    """Behaviour switches for the XLink scraper."""

    end_matching: Literal["name", "depth"] = Field(
        "name",
        description=(
            "How the end of an extended element is found: 'name' stops at the first end tag "
            "with the same name, 'depth' also counts nested same-named elements"
        ),
    )
    filter_locator_href: bool = Field(
        False,
        description="Run locator hrefs through the URL matcher instead of reporting them verbatim",
    )

    model_config = {"extra": "forbid"}


class ScrapeConfig(BaseModel):
    """
    Root configuration model for linkscraper.

    Example:
        config = ScrapeConfig(
            format="xlink",
            xlink=XLinkConfig(end_matching="depth"),
        )

    YAML format:
        format: xlink
        chunk_size: 128kb
        xlink:
          end_matching: depth
        log_level: DEBUG
    """

    format: ScrapeFormat = Field(
        "auto",
        description="Scraper to run (auto picks one from the file suffix)",
    )
    chunk_size: ByteSize = Field(
        ByteSize(DEFAULT_CHUNK_SIZE),
        description="Bytes handed to the XML tokenizer per read (e.g. '64kb')",
    )
    xlink: XLinkConfig = Field(default_factory=XLinkConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ScrapeConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ScrapeConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
