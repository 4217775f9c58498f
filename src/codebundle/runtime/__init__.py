"""Runtime wiring: settings and the bundling pipeline."""
