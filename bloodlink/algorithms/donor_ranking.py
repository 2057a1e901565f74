"""
Donor ranking: urgency/location scoring and the urgency-based truncation rules.

Scores are small integers where lower is better. Urgency dominates and a donor
in the request's own city is preferred within each urgency tier.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

URGENCY_WEIGHTS = {'High': 0, 'Medium': 5, 'Low': 10}
DEFAULT_URGENCY_WEIGHT = URGENCY_WEIGHTS['Low']
LOCATION_PENALTY = 5

NO_COMPATIBILITY_RULE = 'No compatibility rule'
DEFAULT_RULE_NAME = 'Default: Top 5 donors'
DEFAULT_RULE_LIMIT = 5


@dataclass(frozen=True)
class ScoredDonor:
    id: int
    name: Optional[str]
    phone: Optional[str]
    location: Optional[str]
    blood_group: Optional[str]
    score: int

    @classmethod
    def from_donor(cls, donor, score):
        return cls(
            id=donor.id,
            name=donor.name,
            phone=donor.phone,
            location=donor.location,
            blood_group=donor.blood_group,
            score=score,
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'phone': self.phone,
            'location': self.location,
            'bloodGroup': self.blood_group,
            'score': self.score,
        }


@dataclass(frozen=True)
class MatchRule:
    name: str
    applies: Callable[[object], bool]
    limit: int

    def truncate(self, ranked: Sequence[ScoredDonor]) -> List[ScoredDonor]:
        return list(ranked[:self.limit])


def _urgency_is(level):
    return lambda request: request.urgency_level == level


# Evaluated in order, first match wins
MATCH_RULES = (
    MatchRule('High urgency: Top 10 donors', _urgency_is('High'), 10),
    MatchRule('Medium urgency: Top 5 donors', _urgency_is('Medium'), 5),
    MatchRule('Low urgency: Top 3 donors', _urgency_is('Low'), 3),
)
DEFAULT_RULE = MatchRule(DEFAULT_RULE_NAME, lambda request: True, DEFAULT_RULE_LIMIT)


def _same_location(a, b):
    # Two missing locations compare equal, one missing location does not
    a = a.lower() if a is not None else None
    b = b.lower() if b is not None else None
    return a == b


def urgency_weight(urgency_level):
    if urgency_level not in URGENCY_WEIGHTS:
        # Permissive: unknown urgency is treated as the least urgent tier
        logger.warning("Unrecognized urgency level %r, scoring as Low", urgency_level)
        return DEFAULT_URGENCY_WEIGHT
    return URGENCY_WEIGHTS[urgency_level]


def location_penalty(request, donor):
    return 0 if _same_location(donor.location, request.location) else LOCATION_PENALTY


def score(request, donor) -> int:
    """Urgency weight plus a location penalty when the donor is in another city"""
    return urgency_weight(request.urgency_level) + location_penalty(request, donor)


def rank(request, donors) -> List[ScoredDonor]:
    """
    Score every donor and sort ascending by score.

    Donors with equal scores keep their relative input order (sorted() is stable).
    """
    weight = urgency_weight(request.urgency_level)
    scored = [
        ScoredDonor.from_donor(donor, weight + location_penalty(request, donor))
        for donor in donors
    ]
    return sorted(scored, key=lambda d: d.score)


def select_rule(request) -> Tuple[str, Callable[[Sequence[ScoredDonor]], List[ScoredDonor]]]:
    """Return (rule name, truncate function) for the first rule matching the request"""
    for rule in MATCH_RULES:
        if rule.applies(request):
            return rule.name, rule.truncate
    return DEFAULT_RULE.name, DEFAULT_RULE.truncate
