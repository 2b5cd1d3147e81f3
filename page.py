import logging
from collections import deque
from typing import Awaitable, Callable, Deque, List, Optional

from errors import FALLBACK_ERROR_MESSAGE, AnalysisInProgressError
from schemas import AnalysisResult, FoodLogInput, Notification, PageSnapshot

logger = logging.getLogger("nutrijournal.page")

HISTORY_LIMIT = 3

AnalyzeFn = Callable[[FoodLogInput], Awaitable[AnalysisResult]]


class PageController:
    """
    In-memory state of the single page and the Analyze action.

    One cycle runs at a time: Idle -> Loading -> Idle. The loading flag is
    checked and set before the first await, so overlapping cycles are refused
    without a lock.
    """

    def __init__(self, analyze_fn: AnalyzeFn):
        self.analyze_fn = analyze_fn
        self.food_log = ""
        self.result: Optional[AnalysisResult] = None
        self._history: Deque[AnalysisResult] = deque(maxlen=HISTORY_LIMIT)
        self.is_loading = False
        self.notification: Optional[Notification] = None

    @property
    def history(self) -> List[AnalysisResult]:
        return list(self._history)

    def set_food_log(self, text: str) -> None:
        self.food_log = text

    def pop_notification(self) -> Optional[Notification]:
        notification, self.notification = self.notification, None
        return notification

    def snapshot(self) -> PageSnapshot:
        return PageSnapshot(
            food_log=self.food_log,
            result=self.result,
            history=self.history,
            is_loading=self.is_loading,
        )

    async def analyze(self, raise_errors: bool = False) -> Optional[AnalysisResult]:
        """
        Run one analysis of the current food log.

        On success the result becomes current and is pushed to the front of
        the history. On failure result and history are left as they were and
        a destructive notification is raised; the exception is re-raised only
        when ``raise_errors`` is set. Returns the new result, or None on
        failure.
        """
        if self.is_loading:
            raise AnalysisInProgressError("An analysis is already running.")

        self.is_loading = True
        logger.info("Analyzing food log (%d chars)", len(self.food_log))
        try:
            result = await self.analyze_fn(FoodLogInput(food_log=self.food_log))
        except Exception as e:
            logger.exception("Error analyzing food log")
            self.notification = Notification(
                variant="destructive",
                title="Error",
                description=str(e) or FALLBACK_ERROR_MESSAGE,
            )
            if raise_errors:
                raise
            return None
        finally:
            self.is_loading = False

        self.result = result
        self._history.appendleft(result)
        self.notification = Notification(
            title="Analysis Complete",
            description="Your food log has been analyzed.",
        )
        return result
