"""Input boundary error types.

The engine itself never raises for out-of-range values; it clamps. The only
failures are rejections of raw user input before it becomes a
LifeParameters / Activity value.

Standard error codes:
- INVALID_LIFE_PARAMETERS: birth date, lifespan or granularity rejected
- INVALID_ACTIVITY: an activity could not be built from raw input
- DUPLICATE_ACTIVITY_ID: two activities share the same id
- UNKNOWN_ACTIVITY_ID: an edit referenced an id that is not in the list
"""


class LifeGridInputError(ValueError):
    """Raised when raw input cannot be turned into engine values.

    Attributes:
        code: Error code (e.g., "INVALID_LIFE_PARAMETERS", "INVALID_ACTIVITY")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")
