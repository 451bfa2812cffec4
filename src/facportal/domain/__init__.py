"""Domain layer — date rules, verdicts, issue detection, record policies.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
