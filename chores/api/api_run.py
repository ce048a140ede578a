from fastapi import FastAPI, Query, Depends, Request, Response
from typing import Optional
from datetime import datetime
import logging

from chores.api.dependencies import get_household
from chores.api.routes import chores, members, templates, distribution
from chores.domain.Household import Household
from chores.events.Event_Bus import EventBus
from chores.events.web_observers import EventLog
from chores.infra.Household_Repository import HouseholdRepository, get_repository
from chores.infra.pdf_utils import generate_pdf_for_week
from chores.infra.sample_data import build_sample_household, reset_to_sample_data
from chores.logic.distribution.weekly import current_week_number
from chores.logic.reporting.queries import overview_stats, weekly_chores
from chores.utilities.config import SEED_SAMPLE_DATA, DEBUG

# Logging
logger = logging.getLogger("chores_app")


def _load_household(repository: HouseholdRepository, seed: bool) -> Household:
    household = repository.load()
    if seed and repository.is_empty:
        household.load_snapshot(build_sample_household(), notify=False)
        repository.save(household)
        logger.info("Seeded sample household: %s", household)
    return household


def create_app(repository: Optional[HouseholdRepository] = None, seed: bool = SEED_SAMPLE_DATA) -> FastAPI:
    """Build the API around one Household loaded from the repository and saved after every change."""
    repository = repository or get_repository()
    household = _load_household(repository, seed)
    household.set_event_bus(EventBus())
    repository.autosave(household)
    event_log = EventLog().attach(household.event_bus)

    app = FastAPI(title="Household Chores API", debug=DEBUG)
    app.state.household = household
    app.state.repository = repository
    app.state.event_log = event_log

    app.include_router(chores.router)
    app.include_router(members.router)
    app.include_router(templates.router)
    app.include_router(distribution.router)

    # -------------------- API: Statistics --------------------
    @app.get('/api/stats')
    def api_stats(household: Household = Depends(get_household)):
        """Overview counts (total/completed/pending/overdue/weekly/manual), categories and per-member load."""
        return overview_stats(household)

    # -------------------- API: Change events (polled by clients) --------------------
    @app.get('/api/events')
    def api_events(
        request: Request,
        since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
    ):
        """
        Return recent household change events.

        Client polling strategy:
            1. First call without 'since' to load the current backlog.
            2. Store 'next_cursor' from the response.
            3. Subsequent polls: /api/events?since=<next_cursor>
        """
        return request.app.state.event_log.get_events(since)

    # -------------------- API: Maintenance --------------------
    @app.post('/api/sample-data/reset')
    def api_reset_sample_data(household: Household = Depends(get_household)):
        reset_to_sample_data(household)
        logger.info("Household reset to sample data")
        return {"status": "applied", **overview_stats(household)}

    # -------------------- Export --------------------
    @app.get("/export_pdf")
    def export_pdf(household: Household = Depends(get_household)):
        """Printable sheet of the current weekly batch."""
        batch = weekly_chores(household)
        week = batch[0].week_number if batch and batch[0].week_number else current_week_number()
        pdf_bytes = generate_pdf_for_week(batch, week)
        filename = f"weekly_chores_week_{week}_{datetime.now().year}.pdf"
        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    logger.info("Household Chores API ready: %s", household)
    return app


app = create_app()
