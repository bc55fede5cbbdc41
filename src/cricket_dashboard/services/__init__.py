"""Business operations behind the HTTP API and the CLI."""
