"""Permission vocabulary and default roles."""
