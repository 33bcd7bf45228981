from enum import Enum


class TableNames(str, Enum):
    SUBMISSIONS = "submissions"
    RSVP = "rsvp"
    SETTINGS = "settings"
