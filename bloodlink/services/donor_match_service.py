from dataclasses import dataclass, field
from typing import List

from flask import current_app
from werkzeug.exceptions import NotFound

from bloodlink.algorithms.blood_compatibility import compatible_donor_groups
from bloodlink.algorithms.donor_ranking import NO_COMPATIBILITY_RULE, ScoredDonor, rank, select_rule
from bloodlink.extensions import db
from bloodlink.models import BloodRequest, User


@dataclass
class MatchResult:
    request: BloodRequest
    rule_fired: str
    matches: List[ScoredDonor] = field(default_factory=list)

    def to_dict(self):
        return {
            'request': self.request.to_dict(),
            'ruleFired': self.rule_fired,
            'matches': [match.to_dict() for match in self.matches]
        }


def get_request_by_id(request_id):
    blood_request = db.session.get(BloodRequest, request_id)
    if not blood_request:
        raise NotFound('Blood request not found.')
    return blood_request


def get_donors_by_groups_excluding(groups, exclude_user_id):
    """Users in any of the given blood groups, minus the excluded user, in id order"""
    if not groups:
        return []
    return User.query.filter(
        User.blood_group.in_(list(groups)),
        User.id != exclude_user_id
    ).order_by(User.id).all()


def match_request(blood_request, donors):
    """Rank an already filtered donor pool and apply the urgency rule"""
    ranked = rank(blood_request, donors)
    rule_fired, truncate = select_rule(blood_request)
    return MatchResult(blood_request, rule_fired, truncate(ranked))


def match_donors(request_id):
    blood_request = get_request_by_id(request_id)

    groups = compatible_donor_groups(blood_request.blood_group)
    if not groups:
        current_app.logger.info(
            "Blood request %s has unrecognized blood group %r, no donors matched",
            blood_request.id, blood_request.blood_group
        )
        return MatchResult(blood_request, NO_COMPATIBILITY_RULE, [])

    donors = get_donors_by_groups_excluding(groups, blood_request.requester_id)
    result = match_request(blood_request, donors)
    current_app.logger.info(
        "Matched blood request %s: %d of %d candidates (%s)",
        blood_request.id, len(result.matches), len(donors), result.rule_fired
    )
    return result
