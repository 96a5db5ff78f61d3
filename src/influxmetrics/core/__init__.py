"""Core emission logic, independent of any concrete transport."""
