from enum import Enum

class EnvironmentVariable(Enum):
    VIOLATIONS_API_KEY = 'VIOLATIONS_API_KEY'
    VIOLATIONS_API_URL = 'VIOLATIONS_API_URL'
    VIOLATIONS_DISPLAY_TIMEZONE = 'VIOLATIONS_DISPLAY_TIMEZONE'
