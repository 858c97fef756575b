"""Infrastructure layer — reading messages from stdin, files, and CI.

This layer depends on stdlib only.
It must never import from domain, services, commands, or output.
"""
