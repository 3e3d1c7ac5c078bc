from .config_logging import LOGGING, build_logging_config, configure_logging
from .converters_scalar import parse_qif_amount, parse_qif_date, to_posting_amount
from .core_util import open_for_read, unwrap_brackets

__all__ = [
    "unwrap_brackets",
    "open_for_read",
    "parse_qif_date",
    "parse_qif_amount",
    "to_posting_amount",
    "LOGGING",
    "build_logging_config",
    "configure_logging",
]
