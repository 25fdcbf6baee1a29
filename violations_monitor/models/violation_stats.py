from dataclasses import dataclass

@dataclass(frozen=True)
class ViolationStats:
    """ Summary counts over a full snapshot. no_plate_count and
        detected_count need not add up to total: records without any
        plate_text count towards neither.
    """

    total: int = 0
    new_count: int = 0
    no_plate_count: int = 0
    detected_count: int = 0
