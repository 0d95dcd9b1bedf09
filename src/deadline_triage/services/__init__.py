"""Supporting services for the triage API."""
