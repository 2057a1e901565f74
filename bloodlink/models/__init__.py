from bloodlink.models.user_model import User
from bloodlink.models.blood_request_model import BloodRequest

# Largest primary key a 64-bit INTEGER column can hold
MAX_ROW_ID = 2 ** 63 - 1

__all__ = ['User', 'BloodRequest', 'MAX_ROW_ID']
