"""Scheduling-poll API: events with candidate slots and participant responses."""
