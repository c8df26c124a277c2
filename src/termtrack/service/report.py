# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from termtrack.model.entry import TimeEntry
from termtrack.time import date_from_str, minutes_to_hours_str

NO_DATA_MESSAGE = "No data found."
WEEK_SEPARATOR = "---------------------"


class ReportStatus:
    OK = "ok"
    NO_DATA = "no_data"  # nothing stored at all
    NO_MATCHES = "no_matches"  # entries exist, none in the requested month


class ReportSelection(TypedDict):
    status: str
    month: Optional[str]
    entries: list[TimeEntry]


class DaySummary(TypedDict):
    minutes: int
    entries: list[TimeEntry]


def filter_by_month(
    entries: list[TimeEntry], month: Optional[str] = None
) -> ReportSelection:
    if len(entries) == 0:
        return {"status": ReportStatus.NO_DATA, "month": month, "entries": []}

    filtered = entries
    if month:
        filtered = [entry for entry in entries if entry["date"].startswith(month)]

    if len(filtered) == 0:
        return {"status": ReportStatus.NO_MATCHES, "month": month, "entries": []}
    return {"status": ReportStatus.OK, "month": month, "entries": filtered}


def empty_selection_message(selection: ReportSelection) -> str:
    if selection["status"] == ReportStatus.NO_DATA:
        return NO_DATA_MESSAGE
    return f"No entries found for {selection['month'] or 'all time'}."


def total_minutes(entries: list[TimeEntry]) -> int:
    return sum(entry["duration_minutes"] for entry in entries)


def project_totals(entries: list[TimeEntry]) -> dict[str, int]:
    """Minutes per project, keyed in order of each project's first appearance."""
    totals: dict[str, int] = {}
    for entry in entries:
        totals[entry["project"]] = totals.get(entry["project"], 0) + entry[
            "duration_minutes"
        ]
    return totals


def day_summaries(entries: list[TimeEntry]) -> dict[str, DaySummary]:
    """Minutes and entries per date, keyed in ascending date order."""
    days: dict[str, DaySummary] = {}
    for entry in entries:
        day = days.setdefault(entry["date"], {"minutes": 0, "entries": []})
        day["minutes"] += entry["duration_minutes"]
        day["entries"].append(entry)
    return {date: days[date] for date in sorted(days)}


def format_duration(minutes: int) -> str:
    return f"{minutes_to_hours_str(minutes)}h ({minutes}m)"


def __calendar_day(date: str) -> Optional[pendulum.Date]:
    try:
        return date_from_str(date)
    except ValueError:
        return None


def aggregate_report(entries: list[TimeEntry], month: Optional[str] = None) -> str:
    selection = filter_by_month(entries, month)
    if selection["status"] != ReportStatus.OK:
        return empty_selection_message(selection)

    filtered = selection["entries"]
    title = f"Report for {month}" if month else "Total Report"
    minutes = total_minutes(filtered)

    lines = [
        "",
        f"--- {title} ---",
        f"Total Time: {minutes_to_hours_str(minutes)} hours ({minutes} mins)",
        "",
        "By Project:",
    ]
    for project, project_minutes in project_totals(filtered).items():
        lines.append(f" - {project:<20}: {format_duration(project_minutes)}")

    lines.append("")
    lines.append("By Day:")
    for date, day in day_summaries(filtered).items():
        calendar_day = __calendar_day(date)
        day_name = ""
        if calendar_day is not None:
            # Mondays open a new work week
            if calendar_day.day_of_week == pendulum.MONDAY:
                lines.append(WEEK_SEPARATOR)
            day_name = calendar_day.format("dddd")

        lines.append(f" - {date} ({day_name:<9}): {format_duration(day['minutes']):>15}")
        for entry in day["entries"]:
            duration = f"{entry['duration_minutes']}m"
            detail = f"   • {entry['project']:<20} {duration:<6}"
            if entry["description"]:
                detail += f": {entry['description']}"
            lines.append(detail)

    lines.append(WEEK_SEPARATOR)
    return "\n".join(lines) + "\n"


def table_report(entries: list[TimeEntry], month: Optional[str] = None) -> str:
    """Tab-separated rows per day, ready to paste into a spreadsheet."""
    selection = filter_by_month(entries, month)
    if selection["status"] != ReportStatus.OK:
        return empty_selection_message(selection)

    lines = ["Date\tHours\tDescription"]
    for date, day in day_summaries(selection["entries"]).items():
        descriptions = "; ".join(entry["description"] for entry in day["entries"])
        lines.append(f"{date}\t{minutes_to_hours_str(day['minutes'])}\t{descriptions}")
    return "\n".join(lines) + "\n"
