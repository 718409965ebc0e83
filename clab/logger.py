# CLAB Command Line Arguments Builder — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for CLAB."""
import logging

logger: logging.Logger = logging.getLogger("clab")
