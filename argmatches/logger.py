# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for argmatches."""
import logging

logger: logging.Logger = logging.getLogger("argmatches")
