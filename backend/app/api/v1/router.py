from fastapi import APIRouter
from app.api.v1.endpoints import auth, users, profiles, assignments, targets, progress, lead_entries, performance, reports

api_router = APIRouter()


@api_router.get("/health", tags=["Health"])
async def health_check():
    """Simple health check endpoint for load balancer"""
    return {"status": "healthy", "service": "leadtrack-backend"}


api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["Profiles"])
api_router.include_router(assignments.router, tags=["Assignments"])
api_router.include_router(targets.router, prefix="/targets", tags=["Targets"])
api_router.include_router(progress.router, prefix="/progress-updates", tags=["Progress"])
api_router.include_router(lead_entries.router, prefix="/lead-entries", tags=["Lead Entries"])
api_router.include_router(performance.router, tags=["Performance"])
api_router.include_router(reports.router, prefix="/reports", tags=["Reports"])
