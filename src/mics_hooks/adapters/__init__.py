"""Adapters – optional transports (FastAPI, aiokafka).

Each adapter imports its library lazily and raises ``ImportError`` naming
the extra to install.
"""
