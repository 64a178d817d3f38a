import logging
from dataclasses import dataclass, field
from typing import Optional

from gpacalc.domain.logic.gpa import GPAValidationError, calc_gpa
from gpacalc.domain.models.entities import GPAResult
from gpacalc.state.record_list import RecordList, RecordListError

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    records: RecordList = field(default_factory=RecordList)
    result: Optional[GPAResult] = None
    show_count_prompt: bool = True
    loading: bool = False

    @property
    def can_calculate(self) -> bool:
        return self.records.is_complete()

    @property
    def is_result_open(self) -> bool:
        return self.result is not None

    @property
    def should_celebrate(self) -> bool:
        return bool(self.result and self.result.celebrate)

    def choose_count(self, text: str) -> bool:
        """Apply the one-time course count prompt. Returns False if the text was ignored."""
        if not self.show_count_prompt:
            return False
        try:
            count = int(text.strip())
        except (AttributeError, ValueError):
            return False
        try:
            self.records.set_count(count)
        except RecordListError as exc:
            logger.warning("Course count ignored: %s", exc)
            return False
        self.show_count_prompt = False
        logger.info("Course count set to %d", count)
        return True

    def calculate(self) -> GPAResult:
        self.loading = True
        try:
            result = calc_gpa(self.records.snapshot())
        except GPAValidationError as exc:
            self.result = None
            logger.warning("GPA calculation refused: %s", exc)
            raise
        finally:
            self.loading = False
        self.result = result
        logger.info("GPA %.2f over %d course(s): %s", result.gpa, len(self.records), result.tier)
        return result

    def dismiss_result(self) -> None:
        self.result = None
