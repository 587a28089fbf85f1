from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class ConversionConfig:
    """Options for a single JSON to TypeScript conversion."""

    use_interfaces: bool = True
    """Emit `export interface Name {...}` declarations. If False, emit
    `export type Name = {...};` aliases instead."""

    use_optional_fields: bool = False
    """Mark every generated property as optional (`name?: Type`)."""
