"""
app-platform-spec: integration test package marker.

File: tests/integration/__init__.py
Last updated: 2026-10-18

Purpose
- End-to-end tests that build resources and render full manifests.

Functional requirements
- Must not trigger network access; resolution backends are in-memory fakes.
"""
