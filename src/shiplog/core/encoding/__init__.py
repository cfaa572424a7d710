"""Encoders turning log entries into wire and console formats."""
