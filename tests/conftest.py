import pytest

from bloodlink import create_app
from bloodlink.config import TestingConfig
from bloodlink.extensions import db
from bloodlink.models import BloodRequest, User


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make_user(name='Donor', blood_group='O+', location='Chennai', phone='9000000000', **kwargs):
        user = User(name=name, blood_group=blood_group, location=location, phone=phone, **kwargs)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def make_request(app, make_user):
    def _make_request(requester=None, blood_group='A+', location='Chennai', urgency_level='High', **kwargs):
        if requester is None:
            requester = make_user(name='Requester', blood_group=None, location=location)
        fields = dict(name='Patient', address='12 Hospital Road', phone='9111111111')
        fields.update(kwargs)
        blood_request = BloodRequest(
            requester_id=requester.id,
            blood_group=blood_group,
            location=location,
            urgency_level=urgency_level,
            **fields
        )
        db.session.add(blood_request)
        db.session.commit()
        return blood_request
    return _make_request
