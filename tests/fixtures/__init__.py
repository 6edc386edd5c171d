"""Test fixtures for the Story Spoiler harness.

- api: fake backend, transport, client, session and runner fixtures
- fake_api: the in-process FastAPI stand-in for the remote service
"""
