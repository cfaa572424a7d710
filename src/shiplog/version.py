"""Package version and the User-Agent sent to logging services."""

__version__ = "0.1.0"

# Identifies this client, not the host application.
USER_AGENT = f"shiplog/{__version__}"
