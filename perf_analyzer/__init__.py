"""
Web Performance Analyzer - measure and classify page and API performance.

This package times a single request against a web page or an API endpoint,
sizes its payload, estimates the sub-resources a page references, and maps
the result to a qualitative performance tier.
"""

__version__ = "1.0.0"
__author__ = "Web Performance Analyzer Team"
