"""Course payments service."""
