from datetime import datetime
from bloodlink.extensions import db


class User(db.Model):
    """A registered app user; any user with a blood group is a donation candidate"""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), unique=True)
    phone = db.Column(db.String(20))
    blood_group = db.Column(db.String(5))
    location = db.Column(db.String(100))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    blood_requests = db.relationship('BloodRequest', backref='requester', lazy=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'bloodGroup': self.blood_group,
            'location': self.location,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<User {self.name}>'
