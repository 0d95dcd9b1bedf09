"""HTTP routers exposed by the triage backend."""
