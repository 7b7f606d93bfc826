"""Internal modules for Linode SDK.

WARNING: This package contains the request engine used by LinodeClient.
These are not intended for direct use in application code.

Modules:
    dispatch - Request dispatch and response mapping
    http - Shared HTTP client configuration
"""
