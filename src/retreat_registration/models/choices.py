"""Enums for the registration form choices"""

from enum import Enum


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class Affiliation(str, Enum):
    ELOHIMS = "ELOHIM'S"
    RDG = "RDG"
    NONE = "Nil"


class HowHeard(str, Enum):
    ELOHIMS = "ELOHIM'S"
    RDG = "RDG"
    FRIEND = "FRIEND"
    CHURCH = "CHURCH"
    STATUS = "STATUS"
    OTHER = "OTHER"


class DramaMinistry(str, Enum):
    YES = "Yes"
    NO = "No"
    UNDECIDED = "Not Sure Yet"


class WorshipMinister(str, Enum):
    YES = "Yes"
    NO = "No"
