"""Services around the game models: logging, operation log and replay."""
