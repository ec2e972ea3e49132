"""
API package containing versioned routes.

Version subpackages expose a top‑level ``router``.  Version 1 is
mounted under the unversioned ``/api`` prefix because existing
clients call ``/api/users`` directly.
"""
