import json
import logging
import sys
import traceback
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any


class CustomJSONEncoder(json.JSONEncoder):
	def default(self, o):
		if isinstance(o, datetime):
			return o.isoformat()
		return super().default(o)


class JSONFormatter(logging.Formatter):
	"""
	Formatter that outputs structured JSON logs, one object per line.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.now(UTC).isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		if hasattr(record, 'extra_data'):
			log_entry['data'] = record.extra_data

		return json.dumps(log_entry, ensure_ascii=False, cls=CustomJSONEncoder)


class AppLogger:
	"""
	Installs console and (optionally) rotating JSON file handlers on the root logger.
	"""

	def __init__(
		self,
		log_directory: str = 'logs',
		console_level: str = 'INFO',
		file_level: str = 'DEBUG',
		log_to_file: bool = False,
		max_file_size: int = 10 * 1024 * 1024,
		backup_count: int = 5,
	):
		self.log_directory = Path(log_directory)
		self.console_level = getattr(logging, console_level.upper())
		self.file_level = getattr(logging, file_level.upper())
		self.log_to_file = log_to_file
		self.max_file_size = max_file_size
		self.backup_count = backup_count

		self._setup_logging()

	def _setup_logging(self) -> None:
		root_logger = logging.getLogger()
		root_logger.handlers.clear()
		root_logger.setLevel(logging.DEBUG)

		logging.getLogger('httpx').setLevel(logging.WARNING)
		logging.getLogger('httpcore').setLevel(logging.WARNING)

		self._setup_console_handler(root_logger)
		if self.log_to_file:
			self.log_directory.mkdir(parents=True, exist_ok=True)
			self._setup_file_handler(root_logger, 'app.log', self.file_level)
			self._setup_file_handler(root_logger, 'errors.log', logging.WARNING)

	def _setup_console_handler(self, logger: logging.Logger) -> None:
		console_handler = logging.StreamHandler(sys.stdout)
		console_handler.setLevel(self.console_level)
		console_format = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
		console_handler.setFormatter(logging.Formatter(console_format, datefmt='%H:%M:%S'))
		logger.addHandler(console_handler)

	def _setup_file_handler(self, logger: logging.Logger, filename: str, level: int) -> None:
		file_handler = RotatingFileHandler(
			self.log_directory / filename,
			maxBytes=self.max_file_size,
			backupCount=self.backup_count,
			encoding='utf-8',
		)
		file_handler.setLevel(level)
		file_handler.setFormatter(JSONFormatter())
		logger.addHandler(file_handler)


class LogLevel(Enum):
	DEBUG = 'DEBUG'
	INFO = 'INFO'
	WARNING = 'WARNING'
	ERROR = 'ERROR'
	CRITICAL = 'CRITICAL'


class EventType(Enum):
	RATE_FETCH = 'rate_fetch'
	CONVERSION = 'conversion'
	USER_REQUEST = 'user_request'
	SERVICE_LIFECYCLE = 'service_lifecycle'
	HEALTH_CHECK = 'health_check'


@dataclass
class LogEvent:
	event_type: EventType
	level: LogLevel
	message: str
	timestamp: datetime
	duration_ms: float | None = None
	user_context: dict[str, Any] | None = None
	api_context: dict[str, Any] | None = None
	error_context: dict[str, Any] | None = None

	def to_dict(self) -> dict[str, Any]:
		data = asdict(self)
		data['timestamp'] = self.timestamp.isoformat()
		data['event_type'] = self.event_type.value
		data['level'] = self.level.value
		return data


class ProductionLogger:
	def __init__(self):
		self.system_logger = logging.getLogger('currency_widget')
		self.api_logger = logging.getLogger('currency_widget.api')

	def log_event(self, event: LogEvent):
		logger = self.api_logger if event.event_type == EventType.USER_REQUEST else self.system_logger

		level_map = {
			LogLevel.DEBUG: logger.debug,
			LogLevel.INFO: logger.info,
			LogLevel.WARNING: logger.warning,
			LogLevel.ERROR: logger.error,
			LogLevel.CRITICAL: logger.critical,
		}

		log_func = level_map.get(event.level, logger.info)
		log_func(event.message, extra={'extra_data': event.to_dict()})

	def log_rate_fetch(
		self,
		provider_name: str,
		pivot: str,
		success: bool,
		response_time_ms: float,
		rate_count: int | None = None,
		error_message: str | None = None,
	):
		event = LogEvent(
			event_type=EventType.RATE_FETCH,
			level=LogLevel.INFO if success else LogLevel.ERROR,
			message=f"Rate fetch from {provider_name} (base {pivot}): {'SUCCESS' if success else 'FAILED'}",
			timestamp=datetime.now(UTC),
			duration_ms=response_time_ms,
			api_context={
				'provider': provider_name,
				'pivot': pivot,
				'success': success,
				'rate_count': rate_count,
			},
			error_context={'error_message': error_message} if error_message else None,
		)
		self.log_event(event)

	def log_conversion(self, from_currency: str, to_currency: str, amount: float,
	                   success: bool, error_message: str | None = None):
		event = LogEvent(
			event_type=EventType.CONVERSION,
			level=LogLevel.DEBUG if success else LogLevel.WARNING,
			message=f"Conversion {from_currency}->{to_currency}: {'OK' if success else 'REJECTED'}",
			timestamp=datetime.now(UTC),
			user_context={
				'from_currency': from_currency,
				'to_currency': to_currency,
				'amount': amount,
			},
			error_context={'error_message': error_message} if error_message else None,
		)
		self.log_event(event)

	def log_user_request(self, endpoint: str, request_data: dict[str, Any],
	                     success: bool, response_time_ms: float,
	                     error_message: str | None = None):
		event = LogEvent(
			event_type=EventType.USER_REQUEST,
			level=LogLevel.INFO if success else LogLevel.ERROR,
			message=f"User request to {endpoint}: {'SUCCESS' if success else 'FAILED'}",
			timestamp=datetime.now(UTC),
			duration_ms=response_time_ms,
			user_context={
				'endpoint': endpoint,
				'request_data': request_data,
				'success': success,
			},
			error_context={'error_message': error_message} if error_message else None,
		)
		self.log_event(event)

	def log_lifecycle(self, message: str, app_name: str):
		event = LogEvent(
			event_type=EventType.SERVICE_LIFECYCLE,
			level=LogLevel.INFO,
			message=message,
			timestamp=datetime.now(UTC),
			api_context={'app_name': app_name},
		)
		self.log_event(event)


app_logger: AppLogger | None = None
production_logger: ProductionLogger | None = None


def configure_logging(
	level: str = 'INFO', log_directory: str = 'logs', log_to_file: bool = False
) -> AppLogger:
	"""Install handlers once per process. Later calls return the existing setup."""
	global app_logger
	if app_logger is None:
		app_logger = AppLogger(
			log_directory=log_directory, console_level=level, log_to_file=log_to_file
		)
	return app_logger


def get_production_logger() -> ProductionLogger:
	global production_logger
	if production_logger is None:
		production_logger = ProductionLogger()
	return production_logger
