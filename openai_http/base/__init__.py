"""Base layer: settings, errors, logging, timeouts, HTTP helpers and streaming."""
