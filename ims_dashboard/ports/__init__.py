"""
Ports - Interfaces for storage, authentication, and resources.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from ims_dashboard.ports.storage_port import DurableStoragePort
from ims_dashboard.ports.auth_port import AuthenticationPort
from ims_dashboard.ports.resource_port import ResourcePort

__all__ = [
    "DurableStoragePort",
    "AuthenticationPort",
    "ResourcePort",
]
