"""Git & GitHub workflow automation."""
