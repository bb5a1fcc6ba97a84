"""Meeting records service: meetings, their sections and action items."""

__version__ = "0.1.0"
