from pydantic import BaseModel


class TeamPerformanceRow(BaseModel):
    user_id: int
    name: str
    profile: str
    target_jobs_to_fetch: int
    target_jobs_to_apply: int
    jobs_fetched: int
    jobs_applied: int
    completion: int
