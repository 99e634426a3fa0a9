"""Services: long-lived objects wiring configuration, persistence and workflows."""
