# models/health.py
"""
Health record kinds

Every health record the app logs belongs to one RecordType. Goals reuse the
same enumeration to say which metric they track, and the string values are
written verbatim into the goals file.
"""

from enum import Enum


class RecordType(str, Enum):
    MEAL = 'meal'            # calories consumed
    EXERCISE = 'exercise'    # calories burnt
    STEPS = 'steps'
    WATER = 'water'
    SLEEP = 'sleep'
    WEIGHT = 'weight'        # logged only, no goal variant

    @classmethod
    def parse(cls, text):
        """Look up a record type by its stored value (case-insensitive)"""
        value = (text or '').strip().lower()
        for record_type in cls:
            if record_type.value == value:
                return record_type
        raise ValueError(f"Unknown record type: {text}")
