# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

import re
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Discriminator


class ExactMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["exact"] = "exact"
    value: str

    def matches(self, candidate: str) -> bool:
        return self.value == candidate


class PatternMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["pattern"] = "pattern"
    pattern: re.Pattern

    def matches(self, candidate: str) -> bool:
        return self.pattern.search(candidate) is not None


def coerce_matcher(entry: Any) -> Any:
    """Wrap bare strings and compiled patterns in their tagged matcher."""
    if isinstance(entry, str):
        return ExactMatch(value=entry)
    if isinstance(entry, re.Pattern):
        return PatternMatch(pattern=entry)
    return entry


Matcher = Annotated[
    ExactMatch | PatternMatch,
    Discriminator("kind"),
    BeforeValidator(coerce_matcher),
]
