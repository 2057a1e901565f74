from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import BadRequest, NotFound

from bloodlink.extensions import db
from bloodlink.models import MAX_ROW_ID, BloodRequest, User
from bloodlink.models.blood_request_model import REQUEST_STATUSES

# Define Blueprint for the Blood Request controller
blood_request_bp = Blueprint('blood_request_bp', __name__)

REQUIRED_FIELDS = ['requesterId', 'name', 'bloodGroup', 'location', 'address', 'phone', 'urgencyLevel']


# POST a new blood request
@blood_request_bp.route('', methods=['POST'])
def create_blood_request():
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            raise BadRequest('No input data provided.')

        for field in REQUIRED_FIELDS:
            if not data.get(field):
                raise BadRequest(f'Missing required field: {field}.')

        try:
            requester_id = int(data['requesterId'])
        except (TypeError, ValueError):
            raise BadRequest('Invalid requesterId.')
        if not 0 < requester_id <= MAX_ROW_ID:
            raise BadRequest('Invalid requesterId.')

        requester = db.session.get(User, requester_id)
        if not requester:
            raise NotFound('Requester not found.')

        new_request = BloodRequest(
            requester_id=requester.id,
            name=data['name'],
            blood_group=data['bloodGroup'],
            location=data['location'],
            address=data['address'],
            phone=data['phone'],
            note=data.get('note'),  # Optional field
            urgency_level=data['urgencyLevel']
        )
        db.session.add(new_request)
        db.session.commit()

        current_app.logger.info("Blood request %s created by user %s", new_request.id, requester.id)
        return jsonify({'message': 'Blood request created', 'id': new_request.id}), 201
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except NotFound as e:
        return jsonify({'error': e.description}), 404
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Failed to create blood request")
        return jsonify({'error': 'Failed to create blood request.'}), 500


# GET blood requests, newest first, filtered by status, blood group and location
@blood_request_bp.route('', methods=['GET'])
def get_blood_requests():
    status = request.args.get('status', 'Pending')
    if status not in REQUEST_STATUSES:
        return jsonify({'error': 'Invalid status filter value.'}), 400

    try:
        query = BloodRequest.query.filter(BloodRequest.request_status == status)
        blood_group = request.args.get('bloodGroup')
        if blood_group:
            query = query.filter(BloodRequest.blood_group == blood_group)
        location = request.args.get('location')
        if location:
            query = query.filter(BloodRequest.location == location)

        blood_requests = query.order_by(BloodRequest.created_at.desc(), BloodRequest.id.desc()).all()
        return jsonify([blood_request.to_dict() for blood_request in blood_requests]), 200
    except SQLAlchemyError:
        current_app.logger.exception("Failed to retrieve blood requests")
        return jsonify({'error': 'Failed to retrieve blood requests.'}), 500


# GET a specific blood request by ID
@blood_request_bp.route('/<int:id>', methods=['GET'])
def get_blood_request(id):
    try:
        blood_request = db.session.get(BloodRequest, id) if id <= MAX_ROW_ID else None
        if not blood_request:
            raise NotFound('Blood request not found.')
        return jsonify(blood_request.to_dict()), 200
    except NotFound as e:
        return jsonify({'error': e.description}), 404
    except SQLAlchemyError:
        current_app.logger.exception("Failed to retrieve blood request %s", id)
        return jsonify({'error': 'Database error occurred.'}), 500
