import asyncio
import sys
import typer
from datetime import date
from pathlib import Path
from courseboard.config import settings
from courseboard.logging import logger, get_session_id

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    Course administration dashboard CLI.
    """
    pass

@app.command(name="doctor")
def doctor():
    """
    Check configuration and record store reachability.
    """
    import httpx

    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 Courseboard Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python:     {sys.version.split()[0]}")
    print(f"  Session ID: {get_session_id()}")
    passed += 1

    # ── Check 2: Configuration ───────────────────────────────────────────────
    print("\n[Configuration]")
    print(f"  STORE_BASE_URL:         {settings.STORE_BASE_URL}")
    key_set = bool(settings.STORE_API_KEY and settings.STORE_API_KEY.get_secret_value())
    print(f"  STORE_API_KEY:          {'✅ Set' if key_set else '⚠️  Not set'}")
    print(f"  STORE_TIMEOUT_SECONDS:  {settings.STORE_TIMEOUT_SECONDS}")
    print(f"  UPCOMING_LIMIT:         {settings.UPCOMING_LIMIT}")
    print(f"  DASHBOARD_API_URL:      {settings.DASHBOARD_API_URL}")

    # ── Check 3: Record store reachability ───────────────────────────────────
    print("\n[Record Store]")
    try:
        resp = httpx.get(settings.STORE_BASE_URL, timeout=settings.STORE_TIMEOUT_SECONDS)
        print(f"  {settings.STORE_BASE_URL}  ✅ Reachable (HTTP {resp.status_code})")
        passed += 1
    except httpx.HTTPError as e:
        print(f"  {settings.STORE_BASE_URL}  ❌ Unreachable")
        failures.append(f"Record store not reachable: {e}")

    # ── Summary ──────────────────────────────────────────────────────────────
    total = passed + len(failures)
    print(f"\n{'─' * 50}")
    if failures:
        print(f"Result: {passed}/{total} checks passed\n")
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    else:
        print(f"Result: {passed}/{total} checks passed, all good ✅")
        print()


def _parse_as_of(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"{value!r} is not an ISO date (YYYY-MM-DD)")


@app.command(name="summary")
def summary(
    file: Path | None = typer.Option(None, "--file", help="Read records from a JSON export instead of the store"),
    limit: int = typer.Option(settings.UPCOMING_LIMIT, min=1, help="Maximum upcoming courses to list"),
    as_of: str | None = typer.Option(None, "--as-of", help="Reference date (YYYY-MM-DD), default today"),
):
    """Load all collections once and print the dashboard figures."""
    from courseboard.infra.loader.file_loader import JsonFileEntityLoader
    from courseboard.infra.loader.http_loader import HttpEntityLoader
    from courseboard.orchestration.dashboard_model import DashboardModel, LoadState
    from courseboard.ui.presenters import PLACEHOLDER, rate_text, status_label

    reference = _parse_as_of(as_of)
    today = (lambda: reference) if reference else date.today

    async def _run() -> DashboardModel:
        if file is not None:
            return await DashboardModel.open(JsonFileEntityLoader(file), upcoming_limit=limit, today=today)
        async with HttpEntityLoader.from_settings(settings) as loader:
            return await DashboardModel.open(loader, upcoming_limit=limit, today=today)

    model = asyncio.run(_run())
    if model.state is LoadState.FAILED:
        print(f"❌ Load failed: {model.error.message}")
        raise typer.Exit(code=1)

    view = model.view
    counts = view.counts
    print(f"\nDashboard as of {view.as_of.isoformat()}\n")
    print(f"  Instructors:    {counts.instructors}")
    print(f"  Participants:   {counts.participants}")
    print(f"  Rooms:          {counts.rooms}")
    print(f"  Courses:        {counts.courses} ({counts.active_courses} active, {counts.planned_courses} planned)")
    print(f"  Registrations:  {counts.registrations}")

    print("\n[Course Status]")
    if not view.has_status_data:
        print("  No courses yet")
    for bucket in view.status_distribution:
        print(f"  {status_label(bucket.label):<12} {bucket.count}")

    print("\n[Upcoming Courses]")
    if not view.has_upcoming:
        print("  No upcoming courses")
    for course in view.upcoming:
        print(f"  {course.start_date or PLACEHOLDER:<12} {course.title or PLACEHOLDER}  [{status_label(course.status)}]")

    print("\n[Payments]")
    if counts.registrations == 0:
        print("  No registrations yet")
    else:
        p = view.payments
        print(f"  Paid:         {p.paid_count}")
        print(f"  Outstanding:  {p.outstanding_count}")
        print(f"  Rate:         {rate_text(p.rate)}")
    print()


if __name__ == "__main__":
    app()
