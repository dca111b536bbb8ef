"""
vc_provisioner — import validator keystores into a Lighthouse validator client
and set per-validator fee recipients through its HTTP API.
"""

__version__ = "0.1.0"
