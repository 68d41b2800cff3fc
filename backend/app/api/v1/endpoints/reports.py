from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import date
from typing import Optional

from app.core.database import get_db
from app.core.exceptions import ValidationError
from app.models.user import User
from app.modules.auth.dependencies import get_current_manager
from app.services.report_service import ReportService

router = APIRouter()

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _require_range(from_date: Optional[date], to_date: Optional[date]) -> None:
    if from_date is None or to_date is None:
        raise ValidationError("From date and to date are required")


def _attachment(content, media_type: str, file_name: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={file_name}"}
    )


@router.get("/team-performance")
async def team_performance_report(
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    """Team performance as CSV"""
    _require_range(from_date, to_date)
    content = await ReportService(db).team_performance_csv(from_date, to_date)
    return _attachment(content, "text/csv", "team-performance.csv")


@router.get("/lead-entries")
async def lead_entries_report(
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    """Lead entries as CSV"""
    content = await ReportService(db).lead_entries_csv(from_date, to_date)
    return _attachment(content, "text/csv", "lead-entries.csv")


@router.get("/weekly-sales")
async def weekly_sales_report(
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    """Weekly sales summary as DOCX"""
    _require_range(from_date, to_date)
    file_name, content = await ReportService(db).weekly_sales_docx(from_date, to_date)
    return _attachment(content, DOCX_MEDIA_TYPE, file_name)


@router.get("/daily")
async def daily_report(
    report_date: Optional[date] = Query(None, alias="date"),
    current_user: User = Depends(get_current_manager),
    db: AsyncSession = Depends(get_db)
):
    """Daily performance as DOCX; defaults to today"""
    file_name, content = await ReportService(db).daily_docx(report_date or date.today())
    return _attachment(content, DOCX_MEDIA_TYPE, file_name)
