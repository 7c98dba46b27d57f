# fishcast/app/services/scheduling/scheduler.py
import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from apscheduler.events import EVENT_JOB_ERROR, JobExecutionEvent
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
import pytz

from fishcast.app.core.config import INITIAL_REFRESH_DELAY_SECONDS, REFRESH_INTERVAL_HOURS
from fishcast.app.services.data_collectors.environmental_collector import refresh_environmental_data

logger = logging.getLogger(__name__)

REFRESH_JOB_ID = "environmental_refresh"


def _on_job_error(event: JobExecutionEvent) -> None:
    logger.error("Scheduled job %s failed: %s", event.job_id, event.exception)


def create_scheduler(
    job: Callable = refresh_environmental_data,
    interval_hours: int = REFRESH_INTERVAL_HOURS,
    initial_delay_seconds: int = INITIAL_REFRESH_DELAY_SECONDS,
) -> BackgroundScheduler:
    """
    Builds (without starting) a scheduler running the environmental refresh on a fixed
    interval. It runs in its own thread, apart from request handling.
    """
    scheduler = BackgroundScheduler(timezone=pytz.utc)
    scheduler.add_job(
        job,
        trigger=IntervalTrigger(hours=interval_hours, timezone=pytz.utc),
        id=REFRESH_JOB_ID,
        name="Environmental data refresh",
        next_run_time=datetime.now(pytz.utc) + timedelta(seconds=initial_delay_seconds),
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    scheduler.add_listener(_on_job_error, EVENT_JOB_ERROR)
    return scheduler


def stop_scheduler(scheduler: Optional[BackgroundScheduler]) -> None:
    if scheduler is not None and scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
