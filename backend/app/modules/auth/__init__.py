# Authentication module

from app.modules.auth.dependencies import (
    get_current_user,
    require_roles,
    get_current_manager,
    get_current_lead_gen,
    get_current_sales,
)

__all__ = [
    "get_current_user",
    "require_roles",
    "get_current_manager",
    "get_current_lead_gen",
    "get_current_sales",
]
