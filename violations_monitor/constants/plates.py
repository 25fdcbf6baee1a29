NO_PLATE_DETECTED = 'no_plate_detected'
UNREADABLE = 'unreadable'

NO_PLATE_SENTINELS = (NO_PLATE_DETECTED, UNREADABLE,)
