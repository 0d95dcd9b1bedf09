"""Utility helpers for backend services."""

from .datetime_utils import parse_calendar_date, parse_client_datetime, wall_clock_date

__all__ = ["parse_calendar_date", "parse_client_datetime", "wall_clock_date"]
