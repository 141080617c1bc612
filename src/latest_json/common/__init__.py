"""Common definitions shared by the latest_json core modules."""
