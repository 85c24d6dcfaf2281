"""SmartTeamTracker Backend - youth hockey stats and coaching reports API.

This package provides a hexagonal architecture implementation around the
``teamtracker`` core (normalization, season trends, report prompts).

Layers:
- application: Use cases and port interfaces
- infrastructure: Adapters for Airtable and OpenAI
- api: REST endpoints and dependency wiring
"""

__version__ = "1.0.0"
