from enum import Enum


class ConventionStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    PAST = "PAST"
    CANCELLED = "CANCELLED"


class UserRole(str, Enum):
    ADMIN = "admin"
    ORGANIZER = "organizer"
    USER = "user"
