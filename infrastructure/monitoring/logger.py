import json
import logging
import sys
import traceback
from datetime import datetime
from decimal import Decimal

from config.settings import NodeEnvironment

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'

LEVELS = {
	NodeEnvironment.DEVELOPMENT: logging.DEBUG,
	NodeEnvironment.TEST: logging.INFO,
	NodeEnvironment.PRODUCTION: logging.WARNING,
}


class CustomJSONEncoder(json.JSONEncoder):
	def default(self, o):
		if isinstance(o, datetime):
			return o.isoformat()
		if isinstance(o, Decimal):
			return str(o)
		return super().default(o)


class JSONFormatter(logging.Formatter):
	"""
	Custom formatter that outputs structured JSON logs.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.now().isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info and record.exc_info[0] is not None:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		if hasattr(record, 'extra_data'):
			log_entry['data'] = record.extra_data

		return json.dumps(log_entry, ensure_ascii=False, cls=CustomJSONEncoder)


def configure_logging(node_env: NodeEnvironment) -> None:
	"""Configure the root logger for the given environment.

	Production gets one JSON object per line; other environments get a
	human-readable console format.
	"""
	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.setLevel(LEVELS[node_env])

	logging.getLogger('httpx').setLevel(logging.WARNING)

	console_handler = logging.StreamHandler(sys.stdout)
	if node_env is NodeEnvironment.PRODUCTION:
		console_handler.setFormatter(JSONFormatter())
	else:
		console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
	root_logger.addHandler(console_handler)
