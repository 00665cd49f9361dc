"""Runtime services: telemetry and the editor event loop."""
