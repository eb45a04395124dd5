"""Formatting configuration for Alinea.

FormatConfig is an immutable value passed explicitly into every formatting
call and handed down unchanged. Nothing is stored globally, so differently
configured formatters can run side by side in one process.

Usage:
    from alinea import FormatConfig, format_markup

    config = FormatConfig(print_width=100, align_attributes=True)
    output = format_markup('<div id="a" class="b"></div>', config)

    # From a settings mapping (e.g. a loaded TOML table)
    config = FormatConfig.from_dict({"print_width": 100, "bracket_placement": "aligned"})

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from alinea.errors import ConfigError


class BracketPlacement(Enum):
    """Where the tag terminator (`>` or `/>`) goes after aligned attributes.

    ATTACHED: directly after the last attribute (`alt="a" />`)
    ALIGNED: on its own line, at the attribute alignment column
    HARDLINE: on its own line, at the element's indentation
    """

    ATTACHED = "attached"
    ALIGNED = "aligned"
    HARDLINE = "hardline"


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable formatting configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        print_width: Line length the layout renderer tries to stay within
        indent_width: Columns added per nesting level of children
        align_attributes: Put attributes 2..N on their own lines, aligned
            under the first attribute. When False, output is exactly the
            default layout.
        bracket_placement: Terminator placement for aligned elements
        trailing_newline: End non-empty output with a newline

    """

    print_width: int = 80
    indent_width: int = 2
    align_attributes: bool = True
    bracket_placement: BracketPlacement = BracketPlacement.ATTACHED
    trailing_newline: bool = True

    def __post_init__(self) -> None:
        if self.print_width < 1:
            raise ConfigError("print_width", f"must be positive, got {self.print_width}")
        if self.indent_width < 0:
            raise ConfigError("indent_width", f"must be >= 0, got {self.indent_width}")
        if not isinstance(self.bracket_placement, BracketPlacement):
            raise ConfigError(
                "bracket_placement",
                f"expected BracketPlacement, got {self.bracket_placement!r}",
            )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> FormatConfig:
        """Create FormatConfig from a mapping.

        Only keys that are FormatConfig field names are used; unknown keys
        are silently ignored. bracket_placement may be given as an enum
        member or as its string value ("attached", "aligned", "hardline").

        Args:
            config_dict: Mapping with config values

        Returns:
            New FormatConfig instance

        Raises:
            ConfigError: If a value is invalid

        Example:
            >>> config = FormatConfig.from_dict({
            ...     "print_width": 120,
            ...     "bracket_placement": "aligned",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.bracket_placement
            <BracketPlacement.ALIGNED: 'aligned'>

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        placement = filtered.get("bracket_placement")
        if isinstance(placement, str):
            try:
                filtered["bracket_placement"] = BracketPlacement(placement.lower())
            except ValueError:
                choices = ", ".join(p.value for p in BracketPlacement)
                raise ConfigError(
                    "bracket_placement", f"unknown value {placement!r} (expected one of {choices})"
                ) from None

        return cls(**filtered)


DEFAULT_CONFIG: FormatConfig = FormatConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "BracketPlacement",
    "FormatConfig",
]
