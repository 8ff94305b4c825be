"""Canary Simulator.

Tiny HTTP service that pretends to be a deployed application version so
rollout tooling has something to exercise:
 - reports its version and deployment channel
 - injects latency and random 500s depending on the version string
 - optional status page that makes stable vs canary obvious in a browser

Behaviour is selected once at startup from environment variables.
"""

__version__ = "0.1.0"
