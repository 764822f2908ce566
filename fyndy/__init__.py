"""
Fyndy decision service.

Responsibilities:
- Classify free-text product queries and derive a deterministic purchase
  recommendation with trust metrics (``fyndy.decision``).
- Serve that engine over HTTP with optional API-key protection (``fyndy.app``).
"""
