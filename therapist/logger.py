# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for therapist."""
import logging

logger: logging.Logger = logging.getLogger("therapist")
