CANNOT_EXTRACT_STRING = 'Cannot Extract'
NOT_AVAILABLE_STRING = 'N/A'

ERROR_STRING = 'Error: {}'

LAST_UPDATED_STRING = 'Last updated: {}'

LOADING_STRING = 'Loading violations...'
NO_VIOLATIONS_FOUND_STRING = 'No violations found'

NO_PLATE_IMAGE_STRING = 'No Plate Extracted'
NO_SCENE_IMAGE_STRING = 'No Scene Image'

STATS_STRING = (
    'Total Violations: {} | New Alerts: {} | '
    'Plates Detected: {} | No Plate Detected: {}')

STATUS_UPDATED_STRING = 'Status of violation {} set to {}.'
STATUS_UPDATE_FAILED_STRING = 'Could not set status of violation {} to {}.'

VIOLATION_STRING = '[{}] {} | camera: {} | plate: {} | confidence: {} | {}'


def pluralize(number: int) -> str:
    return '' if number == 1 else 's'
