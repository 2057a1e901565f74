from datetime import datetime
from bloodlink.extensions import db

REQUEST_STATUSES = ('Pending', 'Fulfilled', 'Cancelled')


class BloodRequest(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    requester_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    blood_group = db.Column(db.String(5), nullable=False)
    location = db.Column(db.String(100), nullable=False)
    address = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    note = db.Column(db.Text)
    # Free text: rows with an unknown urgency still match under the default rule
    urgency_level = db.Column(db.String(10), nullable=False)
    request_status = db.Column(db.Enum(*REQUEST_STATUSES, name='request_status'), default='Pending', nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'requesterId': self.requester_id,
            'name': self.name,
            'bloodGroup': self.blood_group,
            'location': self.location,
            'address': self.address,
            'phone': self.phone,
            'note': self.note,
            'urgencyLevel': self.urgency_level,
            'requestStatus': self.request_status,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<BloodRequest {self.name}>'
