"""Records, repositories and a dotenv-configured SQLite connection for a spam-moderation database."""

__version__ = "0.1.0"