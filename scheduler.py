"""
Scheduler - Periodic list weight recalculation

Current Setup:
- Weight refresh runs every WEIGHT_REFRESH_INTERVAL_HOURS for every
  non-archived ranking configuration

Usage:
    python scheduler.py                    # Run scheduler daemon
    python scheduler.py --once             # Recalculate all configurations once and exit
    python scheduler.py --once --config 3  # Recalculate one configuration
    python scheduler.py --ranked-list 42   # Recalculate a single ranked list
"""
import asyncio
import sys
from datetime import datetime, timedelta
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from config import settings, ensure_directories
from database import close_engine
from utils import logger, init_logging


class WeightScheduler:
    """Scheduler for automated weight recalculation."""

    def __init__(self):
        self.scheduler = AsyncIOScheduler()
        self._last_run_result = None

    def setup(self):
        """Setup scheduled jobs."""
        ensure_directories()

        self.scheduler.add_job(
            self.refresh_weights,
            IntervalTrigger(hours=settings.WEIGHT_REFRESH_INTERVAL_HOURS),
            id="weight_refresh",
            name="Ranked List Weight Refresh",
            replace_existing=True,
            next_run_time=datetime.now() + timedelta(minutes=1)  # First run in 1 minute
        )

        logger.info("Scheduler setup complete with 1 job (weight refresh)")
        self._log_schedule()

    def _log_schedule(self):
        """Log current job schedule."""
        jobs = self.scheduler.get_jobs()
        logger.info(f"Scheduled jobs ({len(jobs)}):")
        for job in jobs:
            logger.info(f"  - {job.name}: {job.trigger}")

    async def refresh_weights(self, configuration_id: Optional[int] = None) -> bool:
        """
        Job: Recalculate ranked list weights.

        Args:
            configuration_id: Only this configuration (all active ones if None)

        Returns:
            True when every ranked list was recalculated without errors
        """
        from database import get_session
        from processor.weights import calculate_weights, recalculate_all_configurations
        from repositories import RankingConfigurationRepository

        logger.info("Starting weight refresh...")

        try:
            async with get_session() as session:
                if configuration_id is None:
                    outcomes = await recalculate_all_configurations(session)
                else:
                    configuration = await RankingConfigurationRepository(session).get(configuration_id)
                    if configuration is None:
                        logger.error(f"RankingConfiguration {configuration_id} not found")
                        return False
                    outcomes = {configuration_id: await calculate_weights(session, configuration)}
        except Exception as e:
            logger.exception(f"Weight refresh failed: {e}")
            return False

        self._last_run_result = outcomes
        for config_id, outcome in outcomes.items():
            if outcome["success"]:
                logger.info(f"RankingConfiguration {config_id}: {outcome['message']}")
            else:
                logger.warning(f"RankingConfiguration {config_id}: {outcome['error']}")

        return all(outcome["success"] for outcome in outcomes.values())

    async def refresh_ranked_list(self, ranked_list_id: int) -> bool:
        """Job: Recalculate a single ranked list weight."""
        from database import get_session
        from processor.weights import recalculate_ranked_list

        try:
            async with get_session() as session:
                await recalculate_ranked_list(session, ranked_list_id)
        except Exception as e:
            logger.exception(f"Weight recalculation failed for RankedList {ranked_list_id}: {e}")
            return False
        return True

    def start(self):
        """Start the scheduler."""
        self.setup()
        self.scheduler.start()
        logger.info("Scheduler started - Press Ctrl+C to stop")

    def stop(self):
        """Stop the scheduler."""
        self.scheduler.shutdown()
        logger.info("Scheduler stopped")

    def run_once(self, configuration_id: Optional[int] = None) -> bool:
        """Run the weight refresh once and exit."""
        ensure_directories()

        logger.info("Running weight refresh once...")
        result = asyncio.run(self._run_and_close(self.refresh_weights(configuration_id)))

        if result:
            logger.info("Weight refresh completed successfully")
        else:
            logger.error("Weight refresh finished with errors")

        return result

    def run_ranked_list_once(self, ranked_list_id: int) -> bool:
        """Recalculate a single ranked list and exit."""
        return asyncio.run(self._run_and_close(self.refresh_ranked_list(ranked_list_id)))

    @staticmethod
    async def _run_and_close(job) -> bool:
        try:
            return await job
        finally:
            await close_engine()


async def _run_daemon():
    scheduler = WeightScheduler()
    scheduler.start()
    try:
        await asyncio.Event().wait()
    finally:
        scheduler.stop()
        await close_engine()


def main():
    """Main entry point with CLI arguments."""
    import argparse

    parser = argparse.ArgumentParser(description="List Weight Scheduler")
    parser.add_argument("--once", action="store_true", help="Recalculate weights once and exit")
    parser.add_argument("--config", type=int, help="Only recalculate this ranking configuration")
    parser.add_argument("--ranked-list", type=int, help="Recalculate a single ranked list and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    init_logging(app_name="scheduler", log_level="DEBUG" if args.verbose else None)
    if args.verbose:
        logger.debug("Verbose mode enabled")

    scheduler = WeightScheduler()

    if args.ranked_list is not None:
        result = scheduler.run_ranked_list_once(args.ranked_list)
        sys.exit(0 if result else 1)

    if args.once:
        result = scheduler.run_once(args.config)
        sys.exit(0 if result else 1)

    try:
        asyncio.run(_run_daemon())
    except (KeyboardInterrupt, SystemExit):
        logger.info("Received shutdown signal")


if __name__ == "__main__":
    main()
