"""SCE Foundation content and membership portal."""
