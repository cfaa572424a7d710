"""Core domain: log entries, the queue, the logger port and encoders."""
