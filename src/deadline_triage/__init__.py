"""Deadline resolution and task triage backend for the planning canvas."""
