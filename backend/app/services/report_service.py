"""
Report Generation Service
Aggregates progress updates and lead entries into report models and CSV exports

The build_* functions are pure: they take users, profiles, updates and
entries (ORM rows or anything with the same attributes) and return plain
report models. ReportService loads the rows and hands the models to the
DOCX renderer in app.utils.document_generator.
"""

import csv
import io
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ReportGenerationError
from app.core.logging_config import logger
from app.models.user import UserRole
from app.schemas.performance import TeamPerformanceRow
from app.services.lead_entry_service import lead_entry_service
from app.services.performance_service import performance_service
from app.services.profile_service import profile_service
from app.services.progress_service import progress_service
from app.services.user_service import user_service
from app.utils.date_format import (
    WEEKDAYS,
    format_daily_title_date,
    format_joining_date,
    format_report_date_range,
    sanitize_filename_part,
)
from app.utils.document_generator import DocumentGenerator

TEAM_PERFORMANCE_HEADERS = [
    "Name", "Profile", "Target (Fetch)", "Target (Apply)",
    "Jobs Fetched", "Jobs Applied", "Completion (%)",
]
LEAD_ENTRY_HEADERS = [
    "Date", "Sales Coordinator", "Profile", "New Leads", "Client Rejections", "Team Rejections",
]


# ==================== REPORT MODELS ====================

@dataclass
class EmployeeAppliedRow:
    index: int
    name: str
    applied: List[int]  # one per profile column


@dataclass
class WeeklySalesReport:
    from_date: date
    to_date: date
    date_range: str
    profile_names: List[str]
    joining_lines: List[str]
    employee_rows: List[EmployeeAppliedRow]
    profile_totals: List[int]
    weekday_leads: Dict[str, List[int]]  # Monday..Friday -> one count per profile
    lead_totals: List[int]

    @property
    def file_name(self) -> str:
        return f"Weekly_Report_Sales_{sanitize_filename_part(self.date_range)}.docx"


@dataclass
class DailyReportRow:
    index: int
    name: str
    profile: str
    jobs_fetched: int
    jobs_applied: int
    completion: str


@dataclass
class DailyReport:
    report_date: date
    title: str
    rows: List[DailyReportRow] = field(default_factory=list)

    @property
    def file_name(self) -> str:
        return f"Daily_Report_{self.report_date.isoformat()}.docx"


# ==================== BUILDERS ====================

def build_weekly_sales_report(
    from_date: date,
    to_date: date,
    users: Sequence,
    profiles: Sequence,
    updates: Sequence,
    entries: Sequence,
) -> WeeklySalesReport:
    """
    Weekly sales summary.

    users are the lead generation users (table rows, in order); updates and
    entries are expected to be pre-filtered to the date window. Weekend lead
    entries are left out of the weekday rows and the totals.
    """
    applied_by_user: Dict[int, Dict[int, int]] = defaultdict(lambda: defaultdict(int))
    applied_by_profile: Dict[int, int] = defaultdict(int)
    for update in updates:
        applied_by_user[update.user_id][update.profile_id] += update.jobs_applied
        applied_by_profile[update.profile_id] += update.jobs_applied

    leads_by_day: Dict[str, Dict[int, int]] = {day: defaultdict(int) for day in WEEKDAYS}
    for entry in entries:
        weekday = entry.date.weekday()
        if weekday < 5:
            leads_by_day[WEEKDAYS[weekday]][entry.profile_id] += entry.new_leads

    profile_ids = [profile.id for profile in profiles]
    weekday_leads = {
        day: [leads_by_day[day][pid] for pid in profile_ids]
        for day in WEEKDAYS
    }

    return WeeklySalesReport(
        from_date=from_date,
        to_date=to_date,
        date_range=format_report_date_range(from_date, to_date),
        profile_names=[profile.name for profile in profiles],
        joining_lines=[
            f"{user.name} Joining Date {format_joining_date(user.created_at)}"
            for user in users
        ],
        employee_rows=[
            EmployeeAppliedRow(
                index=index,
                name=user.name,
                applied=[applied_by_user[user.id][pid] for pid in profile_ids],
            )
            for index, user in enumerate(users, start=1)
        ],
        profile_totals=[applied_by_profile[pid] for pid in profile_ids],
        weekday_leads=weekday_leads,
        lead_totals=[
            sum(weekday_leads[day][i] for day in WEEKDAYS)
            for i in range(len(profile_ids))
        ],
    )


def build_daily_report(report_date: date, users: Sequence, profiles: Sequence, updates: Sequence) -> DailyReport:
    """One row per lead generation user for a single day"""
    profile_names = {profile.id: profile.name for profile in profiles}

    totals: Dict[int, Dict] = {}
    for update in updates:
        if update.date != report_date:
            continue
        if update.user_id not in totals:
            totals[update.user_id] = {
                "fetched": 0,
                "applied": 0,
                "profile": profile_names.get(update.profile_id, "Unknown Profile"),
            }
        totals[update.user_id]["fetched"] += update.jobs_fetched
        totals[update.user_id]["applied"] += update.jobs_applied

    rows = []
    for index, user in enumerate(users, start=1):
        data = totals.get(user.id)
        fetched = data["fetched"] if data else 0
        applied = data["applied"] if data else 0
        completion = f"{applied / fetched * 100:.1f}%" if fetched > 0 else "0%"
        rows.append(DailyReportRow(
            index=index,
            name=user.name,
            profile=data["profile"] if data else "No data",
            jobs_fetched=fetched,
            jobs_applied=applied,
            completion=completion,
        ))

    return DailyReport(
        report_date=report_date,
        title=f"Daily Performance Report for {format_daily_title_date(report_date)}",
        rows=rows,
    )


def _write_csv(headers: List[str], rows: List[list]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue()


def team_performance_csv(rows: Sequence[TeamPerformanceRow]) -> str:
    return _write_csv(TEAM_PERFORMANCE_HEADERS, [
        [
            row.name,
            row.profile,
            row.target_jobs_to_fetch,
            row.target_jobs_to_apply,
            row.jobs_fetched,
            row.jobs_applied,
            f"{row.completion}%",
        ]
        for row in rows
    ])


def lead_entries_csv(entries: Sequence, user_names: Dict[int, str], profile_names: Dict[int, str]) -> str:
    return _write_csv(LEAD_ENTRY_HEADERS, [
        [
            entry.date.isoformat(),
            user_names.get(entry.user_id, "Unknown"),
            profile_names.get(entry.profile_id, "Unknown"),
            entry.new_leads,
            entry.client_rejections,
            entry.team_rejections,
        ]
        for entry in entries
    ])


# ==================== SERVICE ====================

class ReportService:
    """Service for generating manager reports"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.generator = DocumentGenerator()

    async def team_performance_csv(self, from_date: date, to_date: date) -> str:
        rows = await performance_service.get_team_performance(self.db, from_date, to_date)
        content = team_performance_csv(rows)
        logger.log_report_event("team_performance_csv", len(rows), len(content))
        return content

    async def lead_entries_csv(self, from_date: Optional[date] = None, to_date: Optional[date] = None) -> str:
        entries = await lead_entry_service.list_lead_entries(
            self.db, from_date=from_date, to_date=to_date, expand=False
        )
        users = await user_service.list_users(self.db)
        profiles = await profile_service.list_profiles(self.db)

        content = lead_entries_csv(
            entries,
            {user.id: user.name for user in users},
            {profile.id: profile.name for profile in profiles},
        )
        logger.log_report_event("lead_entries_csv", len(entries), len(content))
        return content

    async def weekly_sales_report(self, from_date: date, to_date: date) -> WeeklySalesReport:
        users = await user_service.list_users(self.db, role=UserRole.LEAD_GEN)
        profiles = await profile_service.list_profiles(self.db)
        updates = await progress_service.list_progress_updates(
            self.db, from_date=from_date, to_date=to_date, expand=False
        )
        entries = await lead_entry_service.list_lead_entries(
            self.db, from_date=from_date, to_date=to_date, expand=False
        )
        return build_weekly_sales_report(from_date, to_date, users, profiles, updates, entries)

    async def daily_report(self, report_date: date) -> DailyReport:
        users = await user_service.list_users(self.db, role=UserRole.LEAD_GEN)
        profiles = await profile_service.list_profiles(self.db)
        updates = await progress_service.list_progress_updates(
            self.db, from_date=report_date, to_date=report_date, expand=False
        )
        return build_daily_report(report_date, users, profiles, updates)

    async def weekly_sales_docx(self, from_date: date, to_date: date) -> tuple:
        """(file name, DOCX bytes)"""
        report = await self.weekly_sales_report(from_date, to_date)
        try:
            content = self.generator.generate_weekly_sales_docx(report)
        except Exception as e:
            logger.log_error_with_context(e, context="weekly_sales_docx")
            raise ReportGenerationError("Failed to generate weekly sales report", report_type="weekly_sales")

        logger.log_report_event("weekly_sales_docx", len(report.employee_rows), len(content))
        return report.file_name, content

    async def daily_docx(self, report_date: date) -> tuple:
        """(file name, DOCX bytes)"""
        report = await self.daily_report(report_date)
        try:
            content = self.generator.generate_daily_docx(report)
        except Exception as e:
            logger.log_error_with_context(e, context="daily_docx")
            raise ReportGenerationError("Failed to generate daily report", report_type="daily")

        logger.log_report_event("daily_docx", len(report.rows), len(content))
        return report.file_name, content
