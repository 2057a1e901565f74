"""
Blood Type Compatibility Helper
Maps a requested (recipient) blood group to the donor groups that may supply it
"""

BLOOD_GROUPS = ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-')

# Recipient blood group -> compatible donor blood groups
COMPATIBILITY = {
    'A+': frozenset(['A+', 'A-', 'O+', 'O-']),
    'A-': frozenset(['A-', 'O-']),
    'B+': frozenset(['B+', 'B-', 'O+', 'O-']),
    'B-': frozenset(['B-', 'O-']),
    'AB+': frozenset(BLOOD_GROUPS),  # Universal recipient
    'AB-': frozenset(['A-', 'B-', 'AB-', 'O-']),
    'O+': frozenset(['O+', 'O-']),
    'O-': frozenset(['O-']),
}


def compatible_donor_groups(requested_group):
    """
    Get the donor blood groups that can supply the requested group

    Args:
        requested_group: Recipient's blood group (e.g., 'A+')

    Returns:
        frozenset of donor blood groups; empty when the group is not recognized
    """
    if not isinstance(requested_group, str):
        return frozenset()
    return COMPATIBILITY.get(requested_group, frozenset())
