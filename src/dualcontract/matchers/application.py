"""
Application of body matchers to a resolved body.

Producer renders get assertions (matchers) in place of literals at the
addressed paths; consumer renders get refined stub values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dualcontract.matchers.models import BodyMatcher, BodyMatchers, MatcherConflictPolicy
from dualcontract.matchers.path import BodyPath, replace_at
from dualcontract.model.values import Mode
from dualcontract.patterns.generators import derive_seed
from dualcontract.shared.infrastructure.config import settings
from dualcontract.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass
class EffectiveAssertions:
    """
    Result of applying body matchers for one mode.

    Attributes:
        body: Resolved body with matcher refinements applied
        matchers: Matchers that were in force (one per path, declaration order)
    """

    body: Any
    matchers: tuple[BodyMatcher, ...] = ()

    @property
    def has_matchers(self) -> bool:
        return bool(self.matchers)


def apply(
    resolved_body: Any,
    matchers: BodyMatchers,
    mode: Mode,
    policy: MatcherConflictPolicy | str | None = None,
    seed: int | None = None,
) -> EffectiveAssertions:
    """
    Apply body matchers to an already resolved body.

    Args:
        resolved_body: Concrete body produced by the resolution engine
        matchers: Body matcher set of the request/response/message
        mode: Render side
        policy: Conflict policy override
        seed: Base seed for stub examples (defaults to configured seed)

    Returns:
        EffectiveAssertions with the refined body and the matchers in force
    """
    mode = Mode(mode)
    if not matchers.has_matchers():
        return EffectiveAssertions(body=resolved_body)

    base_seed = settings.example_seed if seed is None else seed
    effective = matchers.effective(mode, policy)
    body = resolved_body

    for matcher in effective:
        locations = matcher.path.find(body)
        if not locations:
            logger.debug(
                "body_matcher_path_unmatched",
                path=matcher.path.canonical,
                mode=mode.value,
            )
            continue

        for location in locations:
            if mode is Mode.PRODUCER:
                body = replace_at(body, location, matcher.rule.assertion)
            else:
                location_seed = derive_seed(base_seed, BodyPath(location).canonical)
                body = replace_at(
                    body,
                    location,
                    lambda current, rule=matcher.rule, s=location_seed: rule.stub_value(current, s),
                )

    return EffectiveAssertions(body=body, matchers=effective)
