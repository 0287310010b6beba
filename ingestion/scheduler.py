import asyncio
import logging
from datetime import datetime, timezone
from typing import Set

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from core.context import AppContext
from ingestion.runner import import_nodes

logger = logging.getLogger(__name__)

JOB_ID = "node_import"


class NodeImportScheduler:
    """
    Re-import the feed every ``interval_seconds``.
    
    The first run fires as soon as the scheduler starts. Scheduled runs never
    overlap each other but are not coordinated with manual imports. A failed
    run is logged and the schedule carries on.
    """
    
    def __init__(self, context: AppContext, interval_seconds: int = 600):
        self.context = context
        self.interval_seconds = interval_seconds
        self.scheduler = AsyncIOScheduler(timezone=timezone.utc)
        self.runs_completed = 0
        self._in_flight: Set[asyncio.Task] = set()
    
    async def run_import_job(self):
        """Job to run one import"""
        first_run = self.runs_completed == 0
        task = asyncio.current_task()
        if task is not None:
            self._in_flight.add(task)
        
        logger.info("Scheduler: Triggering periodic data import...")
        try:
            count = await import_nodes(self.context)
            logger.info(f"Scheduler: Imported {count} nodes")
        except Exception as e:
            if first_run:
                logger.warning(f"Initial import failed: {e}. Starting with stale/no data.")
            else:
                logger.error(f"Periodic import failed: {e}")
        finally:
            self.runs_completed += 1
            if task is not None:
                self._in_flight.discard(task)
    
    def start(self):
        """Start the scheduler, running the first import immediately"""
        self.scheduler.add_job(
            self.run_import_job,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=JOB_ID,
            replace_existing=True,
            next_run_time=datetime.now(timezone.utc),
            max_instances=1,
            coalesce=True
        )
        self.scheduler.start()
        logger.info(f"Import scheduler started, periodic import every {self.interval_seconds} seconds")
    
    async def stop(self):
        """Stop scheduling and let an import that is already running finish"""
        if not self.scheduler.running:
            return
        # Shutting down the executor cancels running jobs, so drain them first
        self.scheduler.pause()
        if self._in_flight:
            logger.info("Waiting for in-flight import to finish")
            await asyncio.gather(*self._in_flight, return_exceptions=True)
        self.scheduler.shutdown(wait=False)
        logger.info("Import scheduler stopped")
