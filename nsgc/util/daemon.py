import datetime
import threading
import time
from typing import Optional

from nsgc.dto.cleanup import CleanupCycleResult
from nsgc.services.cleanup_service import CleanupService
from nsgc.util.logger import log

class Daemon:
    def __init__(
            self,
            cleanup_service : CleanupService,
            interval : datetime.timedelta,
            stop_event : threading.Event
        ):
        self.cleanup_service = cleanup_service
        self.interval = interval
        self.stop_event = stop_event
        self.cycles = 0

    def start_cleanup_routine(self):
        """Run a cycle now, then one per interval until stop_event is set.

        Ticks are spaced from the previous tick, not from the end of the
        previous cycle. Ticks missed while a cycle overran are dropped.
        """
        interval_seconds = max(self.interval.total_seconds(), 0.001)
        next_tick = time.monotonic()

        while not self.stop_event.is_set():
            self.run_once()

            next_tick += interval_seconds
            now = time.monotonic()
            if next_tick < now:
                missed = int((now - next_tick) // interval_seconds) + 1
                log(f"Cleanup cycle overran the interval, skipping {missed} tick(s)", "WARNING")
                next_tick += missed * interval_seconds

            if self.stop_event.wait(next_tick - time.monotonic()):
                break

        log("Cleanup routine stopped")

    def run_once(self) -> Optional[CleanupCycleResult]:
        self.cycles += 1
        try:
            return self.cleanup_service.run_cycle()
        except Exception as e:
            log(f"Error in Daemon run loop: {e}", "ERROR")
            return None
