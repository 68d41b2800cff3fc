from app.models.user import User, UserRole
from app.models.profile import Profile
from app.models.assignment import LeadGenAssignment, SalesAssignment
from app.models.target import Target
from app.models.progress_update import ProgressUpdate
from app.models.lead_entry import LeadEntry

__all__ = [
    "User",
    "UserRole",
    "Profile",
    "LeadGenAssignment",
    "SalesAssignment",
    "Target",
    "ProgressUpdate",
    "LeadEntry",
]
