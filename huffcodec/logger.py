"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Dict, List, Optional, Union

from .settings import (
    PREPROCESSOR_STEP_INTERVAL,
    TREE_CONSTRUCTION_STEP_INTERVAL,
    CODING_STEP_INTERVAL,
)

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class FrequencyTableLog(Log):
    def __init__(self, unique_symbols: int, total_symbols: int) -> None:
        self.unique_symbols = unique_symbols
        self.total_symbols = total_symbols
        super().__init__("Frequency_table_log", LogLevel.INFO,
                         f"Unique symbols: {unique_symbols}, Total symbols: {total_symbols}")


class TreeConstructionLog(Log):
    def __init__(self, leaf_count: int, depth: int) -> None:
        self.leaf_count = leaf_count
        self.depth = depth
        super().__init__("Tree_construction_log", LogLevel.INFO, f"Leaves: {leaf_count}, Depth: {depth}")


class CodeAssignmentLog(Log):
    def __init__(self, symbol: any, code: str) -> None:
        self.symbol = symbol
        self.code = code
        super().__init__("Code_assignment_log", LogLevel.INFO, f"Symbol: {symbol!r}, Code: {code}")


class CodingLog(Log):
    def __init__(self, symbol_count: int, encoded_size: int) -> None:
        self.symbol_count = symbol_count
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol count: {symbol_count}, Encoded size: {encoded_size}")


class ProgressStep(Log):
    def __init__(self, type_name: str, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__(type_name, LogLevel.PROGRESS, message)


class PreprocessingProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Preprocessing_progress_step", message, total_steps)


class TreeConstructionProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Tree_construction_progress_step", message, total_steps)


class CodingProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Coding_progress_step", message, total_steps)


class Logger:
    def __init__(self) -> None:
        self.progress_counts: Dict[type, int] = {}

        self.logs: List[Log] = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.save_info = True
        self.save_warning = True
        self.save_error = True
        self.save_progress = False

        self.step_intervals: Dict[type, int] = {
            PreprocessingProgressStep: PREPROCESSOR_STEP_INTERVAL,
            TreeConstructionProgressStep: TREE_CONSTRUCTION_STEP_INTERVAL,
            CodingProgressStep: CODING_STEP_INTERVAL,
        }

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS:
            self._log_progress(log)

    def _log_progress(self, log: Log) -> None:
        kind = type(log)
        count = self.progress_counts.get(kind, 0) + 1
        self.progress_counts[kind] = count
        if isinstance(log, ProgressStep):
            if log.total_steps is not None:
                log.message = f"{log.base_message} ({count}/{log.total_steps})"
            else:
                log.message = f"{log.base_message} ({count})"
        if self.record_progress:
            self.logs.append(log)
        interval = self.step_intervals.get(kind, 1)
        if self.display_progress and (count % interval == 0):
            print(log)

    def reset_progress(self, kind: type) -> None:
        """Restart the step count of one kind of progress log."""
        self.progress_counts.pop(kind, None)

    def get_logs(self, level: Optional[int] = None) -> List[Log]:
        if level is None:
            return list(self.logs)
        return [log for log in self.logs if log.level == level]

    def clear(self) -> None:
        self.logs = []
        self.progress_counts = {}

    def _should_save(self, log: Log) -> bool:
        if log.level == LogLevel.INFO:
            return self.save_info
        if log.level == LogLevel.WARNING:
            return self.save_warning
        if log.level == LogLevel.ERROR:
            return self.save_error
        return self.save_progress

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                if self._should_save(log):
                    file.write(str(log) + "\n")
