# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clientcron/errors.py
class ClientCronError(RuntimeError):
    """Base class for clientcron failures."""

class ConfigurationError(ClientCronError, ValueError):
    """Raised when a configuration value cannot produce a valid job."""

class InvalidNodeIdentityError(ClientCronError, ValueError):
    """Raised when a node name is required but empty or missing."""
