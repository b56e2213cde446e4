"""TaskBoard: boards, tasks and their owners over a JSON API and server-rendered pages."""

__version__ = "1.0.0"
