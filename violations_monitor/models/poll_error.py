from dataclasses import dataclass
from datetime import datetime

@dataclass(frozen=True)
class PollError:
    """ The reason the most recent refresh failed """
    message: str
    occurred_at: datetime
