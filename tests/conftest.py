"""Test configuration."""

import logfire

# Spans and events go nowhere during tests
logfire.configure(send_to_logfire=False, console=False)
