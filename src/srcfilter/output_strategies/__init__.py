"""Output strategies for rendering source filter trees."""
