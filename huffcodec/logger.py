"""
logger.py

Logging module for huffcodec.

Every log entry is a typed Log record, so callers (the performance display,
experiments) can pick entries out by attribute rather than parse messages.
"""


from datetime import datetime
from typing import Union, Optional

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3
    DEBUG = 4


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


class FrequencyLog(Log):
    def __init__(self, distinct: int, total: int) -> None:
        self.distinct = distinct
        self.total = total
        super().__init__("Frequency_log", LogLevel.INFO, f"Distinct symbols: {distinct}, Total bytes: {total}")


class TreeLog(Log):
    def __init__(self, leaves: int, depth: int) -> None:
        self.leaves = leaves
        self.depth = depth
        super().__init__("Tree_log", LogLevel.INFO, f"Leaves: {leaves}, Depth: {depth}")


class HeaderLog(Log):
    def __init__(self, bits: int) -> None:
        self.bits = bits
        super().__init__("Header_log", LogLevel.INFO, f"Header bits: {bits}")


class CodingLog(Log):
    def __init__(self, symbol_size: int, encoded_size: int) -> None:
        self.symbol_size = symbol_size
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol size: {symbol_size}, Encoded size: {encoded_size}")


class EncodedSymbolLog(Log):
    def __init__(self, symbol: int, code: str) -> None:
        self.symbol = symbol
        self.code = code
        super().__init__("Encoded_symbol_log", LogLevel.DEBUG, f"Symbol: {symbol}, Code: {code}")


class CodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Coding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.coding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False
        self.record_debug = True

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True
        self.display_debug = False

        self.coding_step_interval_count = 10000

    def _emit(self, log: Log, record: bool, display: bool) -> None:
        if record:
            self.logs.append(log)
        if display:
            print(log)

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            self._emit(log, self.record_info, self.display_info)
        elif log.level == LogLevel.WARNING:
            self._emit(log, self.record_warning, self.display_warning)
        elif log.level == LogLevel.ERROR:
            self._emit(log, self.record_error, self.display_error)
        elif log.level == LogLevel.DEBUG:
            self._emit(log, self.record_debug, self.display_debug)
        elif log.level == LogLevel.PROGRESS and isinstance(log, CodingProgressStep):
            self.coding_progress_count += 1
            count = self.coding_progress_count
            if log.total_steps is not None:
                log.message = f"{log.base_message} ({count}/{log.total_steps})"
            else:
                log.message = f"{log.base_message} ({count})"
            if self.record_progress:
                self.logs.append(log)
            if self.display_progress and (count % self.coding_step_interval_count == 0):
                print(log)
        elif log.level == LogLevel.PROGRESS:
            self._emit(log, self.record_progress, self.display_progress)

    def get_logs(self, log_type: type = Log) -> list:
        return [log for log in self.logs if isinstance(log, log_type)]

    def clear(self) -> None:
        self.logs = []
        self.coding_progress_count = 0

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
