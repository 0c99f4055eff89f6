"""Client library for the Taiga REST API: tasks, user stories, webhooks, resolver, stats and attachments."""

__version__ = "0.1.0"