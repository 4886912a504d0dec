"""Application configuration modules.

- logging: Logging and Sentry setup
- routes: Route table attachment
"""
