from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import BadRequest, NotFound

from bloodlink.models import MAX_ROW_ID
from bloodlink.services.donor_match_service import match_donors

# Define Blueprint for the Donor Match controller
donor_match_bp = Blueprint('donor_match_bp', __name__)


def parse_request_id(raw_id):
    """Request ids must be positive integers that fit a 64-bit key"""
    if not raw_id.isdecimal() or not 0 < int(raw_id) <= MAX_ROW_ID:
        raise BadRequest('Invalid request ID.')
    return int(raw_id)


@donor_match_bp.route('/<request_id>/match', methods=['GET'])
def get_matches_for_request(request_id):
    try:
        result = match_donors(parse_request_id(request_id))
        return jsonify(result.to_dict()), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except NotFound as e:
        return jsonify({'error': e.description}), 404
    except SQLAlchemyError:
        current_app.logger.exception("Donor matching failed for request %s", request_id)
        return jsonify({'error': 'Failed to find donor matches.'}), 500
