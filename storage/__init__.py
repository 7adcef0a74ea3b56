"""SQLite persistence for interview outcome reports."""
