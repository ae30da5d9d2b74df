"""Core modules for the log word analyzer."""

from .log_reader import LogReadError, SAMPLE_LOGS, read_log_lines

__all__ = ["LogReadError", "SAMPLE_LOGS", "read_log_lines"]
