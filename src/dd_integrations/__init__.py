"""
dd-integrations: typed client for the Datadog integrations API.

Covers configuration of the third-party integrations Datadog manages:
- PagerDuty (integration + individual service objects)
- Slack (service hooks and channels)
- AWS (accounts and log collection)
- Google Cloud Platform (service accounts and host filters)
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
