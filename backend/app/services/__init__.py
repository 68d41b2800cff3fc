from app.services.user_service import UserService, user_service
from app.services.profile_service import ProfileService, profile_service
from app.services.assignment_service import AssignmentService, assignment_service
from app.services.target_service import TargetService, target_service
from app.services.progress_service import ProgressService, progress_service
from app.services.lead_entry_service import LeadEntryService, lead_entry_service
from app.services.performance_service import PerformanceService, performance_service
from app.services.report_service import ReportService

__all__ = [
    "UserService",
    "user_service",
    "ProfileService",
    "profile_service",
    "AssignmentService",
    "assignment_service",
    "TargetService",
    "target_service",
    "ProgressService",
    "progress_service",
    "LeadEntryService",
    "lead_entry_service",
    "PerformanceService",
    "performance_service",
    "ReportService",
]
