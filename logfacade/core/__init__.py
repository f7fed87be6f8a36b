"""Facade core: formatting, subscribers, scheduling and the ambient stack."""
