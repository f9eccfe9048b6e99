"""Services Layer — persistence operations used by the routes."""
