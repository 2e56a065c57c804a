"""Test configuration and fixtures."""

import os

import logfire

# Test settings must be in place before any container builds Settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)
