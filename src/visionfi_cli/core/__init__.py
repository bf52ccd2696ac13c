"""Command logic shared by the one-shot commands and interactive mode."""
