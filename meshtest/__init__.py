"""
meshtest - Kubernetes manifest builders for service mesh end-to-end tests.
"""

__version__ = "0.1.0"
