"""Settings data model."""

from __future__ import annotations

from dataclasses import dataclass

from linkdeco.model import DecorationRule
from linkdeco.types import JsonObject


@dataclass(frozen=True)
class DecoratorSettings:
    """Resolved decorator settings: the ordered rule list."""

    rules: tuple[DecorationRule, ...] = ()

    def to_dict(self) -> JsonObject:
        return {"rules": [rule.to_dict() for rule in self.rules]}
