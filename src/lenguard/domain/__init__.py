"""Domain layer — policies, results, capabilities, and the adapter table.

This layer depends only on stdlib and pydantic.
It must never import from rules, config, commands, output, or plugins.
"""
