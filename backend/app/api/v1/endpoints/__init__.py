# API endpoints
from . import auth, users, profiles, assignments, targets, progress, lead_entries, performance, reports

__all__ = ["auth", "users", "profiles", "assignments", "targets", "progress", "lead_entries", "performance", "reports"]
